from task_nlp.locales.types import LanguagePack

PACK = LanguagePack(
    code="it",
    name="Italiano",
    date_locale="it",
    due_triggers=("scadenza", "entro il", "entro", "deve essere fatto entro", "per il", "termine"),
    scheduled_triggers=("programmato per", "programmato il", "iniziare il", "lavorare su", "il"),
    frequencies={
        "DAILY": (
            "giornaliero",
            "giornaliera",
            "quotidiano",
            "quotidiana",
            "ogni giorno",
            "tutti i giorni",
            "giornalmente",
        ),
        "WEEKLY": ("settimanale", "ogni settimana", "tutte le settimane", "settimanalmente", "alla settimana"),
        "MONTHLY": ("mensile", "ogni mese", "tutti i mesi", "mensilmente", "al mese"),
        "YEARLY": ("annuale", "ogni anno", "tutti gli anni", "annualmente", "all'anno"),
    },
    every=("ogni", "tutti i", "tutte le"),
    other=("altro", "altra", "altri", "altre"),
    weekdays={
        "MO": ("lunedì",),
        "TU": ("martedì",),
        "WE": ("mercoledì",),
        "TH": ("giovedì",),
        "FR": ("venerdì",),
        "SA": ("sabato",),
        "SU": ("domenica",),
    },
    plural_weekdays={
        "SA": ("sabati",),
        "SU": ("domeniche",),
    },
    ordinals={
        1: ("primo", "prima"),
        2: ("secondo", "seconda"),
        3: ("terzo", "terza"),
        4: ("quarto", "quarta"),
        -1: ("ultimo", "ultima"),
    },
    periods={
        "DAILY": ("giorno", "giorni"),
        "WEEKLY": ("settimana", "settimane"),
        "MONTHLY": ("mese", "mesi"),
        "YEARLY": ("anno", "anni"),
    },
    hour_units=("h", "hr", "ore", "ora", "o"),
    minute_units=("m", "min", "minuto", "minuti"),
    status_groups={
        "open": ("da fare", "aperto", "pendente", "todo", "in sospeso"),
        "in-progress": ("in corso", "in progresso", "facendo", "lavorando"),
        "done": ("fatto", "completato", "finito", "terminato", "chiuso"),
        "cancelled": ("cancellato", "annullato", "rimosso"),
        "waiting": ("in attesa", "aspettando", "bloccato", "fermo"),
    },
    priority_groups={
        "urgent": ("urgente", "critico", "critica", "massimo", "massima", "prioritario", "prioritaria"),
        "high": ("alto", "alta", "importante", "elevato", "elevata"),
        "normal": ("medio", "media", "normale", "regolare", "standard"),
        "low": ("basso", "bassa", "minore", "minimo", "minima"),
    },
)
