from task_nlp.locales.types import LanguagePack

PACK = LanguagePack(
    code="de",
    name="Deutsch",
    date_locale="de",
    due_triggers=("fällig", "termin", "abgabe", "deadline", "bis zum", "bis"),
    scheduled_triggers=("geplant für", "geplant am", "beginnen am", "anfangen am", "arbeiten an", "am"),
    frequencies={
        "DAILY": ("täglich", "jeden Tag", "alle Tage", "tagaus tagein"),
        "WEEKLY": ("wöchentlich", "jede Woche", "alle Wochen"),
        "MONTHLY": ("monatlich", "jeden Monat", "alle Monate"),
        "YEARLY": ("jährlich", "jedes Jahr", "alle Jahre"),
    },
    every=("jede", "jeden", "jedes", "alle"),
    other=("andere", "anderen", "anderes"),
    weekdays={
        "MO": ("montag",),
        "TU": ("dienstag",),
        "WE": ("mittwoch",),
        "TH": ("donnerstag",),
        "FR": ("freitag",),
        "SA": ("samstag",),
        "SU": ("sonntag",),
    },
    plural_weekdays={
        "MO": ("montags",),
        "TU": ("dienstags",),
        "WE": ("mittwochs",),
        "TH": ("donnerstags",),
        "FR": ("freitags",),
        "SA": ("samstags",),
        "SU": ("sonntags",),
    },
    ordinals={
        1: ("erste", "ersten", "erster"),
        2: ("zweite", "zweiten", "zweiter"),
        3: ("dritte", "dritten", "dritter"),
        4: ("vierte", "vierten", "vierter"),
        -1: ("letzte", "letzten", "letzter"),
    },
    periods={
        "DAILY": ("tag", "tage"),
        "WEEKLY": ("woche", "wochen"),
        "MONTHLY": ("monat", "monate"),
        "YEARLY": ("jahr", "jahre"),
    },
    hour_units=("h", "std", "stunde", "stunden"),
    minute_units=("m", "min", "minute", "minuten"),
    status_groups={
        "open": ("offen", "zu erledigen", "ausstehend", "todo"),
        "in-progress": ("in bearbeitung", "wird bearbeitet", "läuft", "in arbeit"),
        "done": ("erledigt", "fertig", "abgeschlossen", "gemacht"),
        "cancelled": ("abgebrochen", "storniert", "abgesagt"),
        "waiting": ("wartend", "warten", "blockiert", "pausiert"),
    },
    priority_groups={
        "urgent": ("dringend", "eilig", "kritisch", "sofort", "höchste"),
        "high": ("hoch", "hohe", "wichtig", "prioritär"),
        "normal": ("normal", "mittel", "mittlere", "standard"),
        "low": ("niedrig", "niedrige", "gering", "geringe"),
    },
)
