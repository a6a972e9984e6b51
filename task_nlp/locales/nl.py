from task_nlp.locales.types import LanguagePack

PACK = LanguagePack(
    code="nl",
    name="Nederlands",
    date_locale="nl",
    due_triggers=("vervalt op", "deadline", "moet klaar zijn op", "tegen", "uiterlijk", "voor"),
    scheduled_triggers=("gepland voor", "gepland op", "beginnen op", "werken aan", "op"),
    frequencies={
        "DAILY": ("dagelijks", "elke dag", "alle dagen", "per dag"),
        "WEEKLY": ("wekelijks", "elke week", "alle weken", "per week"),
        "MONTHLY": ("maandelijks", "elke maand", "alle maanden", "per maand"),
        "YEARLY": ("jaarlijks", "elk jaar", "alle jaren", "per jaar"),
    },
    every=("elke", "alle", "iedere"),
    other=("andere", "ander"),
    weekdays={
        "MO": ("maandag",),
        "TU": ("dinsdag",),
        "WE": ("woensdag",),
        "TH": ("donderdag",),
        "FR": ("vrijdag",),
        "SA": ("zaterdag",),
        "SU": ("zondag",),
    },
    plural_weekdays={
        "MO": ("maandagen",),
        "TU": ("dinsdagen",),
        "WE": ("woensdagen",),
        "TH": ("donderdagen",),
        "FR": ("vrijdagen",),
        "SA": ("zaterdagen",),
        "SU": ("zondagen",),
    },
    ordinals={
        1: ("eerste",),
        2: ("tweede",),
        3: ("derde",),
        4: ("vierde",),
        -1: ("laatste",),
    },
    periods={
        "DAILY": ("dag", "dagen"),
        "WEEKLY": ("week", "weken"),
        "MONTHLY": ("maand", "maanden"),
        "YEARLY": ("jaar", "jaren"),
    },
    hour_units=("u", "uur", "uren", "h"),
    minute_units=("m", "min", "minuut", "minuten"),
    status_groups={
        "open": ("te doen", "open", "nog te doen", "todo", "openstaand"),
        "in-progress": ("bezig", "in behandeling", "aan het werk", "lopend", "in uitvoering"),
        "done": ("klaar", "voltooid", "gedaan", "afgerond", "gesloten"),
        "cancelled": ("geannuleerd", "afgezegd", "ingetrokken"),
        "waiting": ("wachtend", "in de wacht", "geblokkeerd", "uitgesteld"),
    },
    priority_groups={
        "urgent": ("urgent", "kritiek", "hoogste", "spoed", "direct"),
        "high": ("hoog", "hoge", "belangrijk", "belangrijke"),
        "normal": ("normaal", "normale", "gemiddeld", "standaard"),
        "low": ("laag", "lage", "klein", "kleine", "onbelangrijk"),
    },
)
