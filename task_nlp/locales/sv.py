from task_nlp.locales.types import LanguagePack

PACK = LanguagePack(
    code="sv",
    name="Svenska",
    date_locale="sv",
    due_triggers=("förfaller", "deadline", "måste vara klar", "senast", "innan"),
    scheduled_triggers=("schemalagd", "planerad för", "börja", "arbeta med", "på"),
    frequencies={
        "DAILY": ("dagligen", "varje dag", "alla dagar", "per dag"),
        "WEEKLY": ("veckovis", "varje vecka", "alla veckor", "per vecka"),
        "MONTHLY": ("månadsvis", "varje månad", "alla månader", "per månad"),
        "YEARLY": ("årligen", "varje år", "alla år", "per år"),
    },
    every=("varje", "alla", "var"),
    other=("annan", "annat", "andra"),
    weekdays={
        "MO": ("måndag",),
        "TU": ("tisdag",),
        "WE": ("onsdag",),
        "TH": ("torsdag",),
        "FR": ("fredag",),
        "SA": ("lördag",),
        "SU": ("söndag",),
    },
    plural_weekdays={
        "MO": ("måndagar",),
        "TU": ("tisdagar",),
        "WE": ("onsdagar",),
        "TH": ("torsdagar",),
        "FR": ("fredagar",),
        "SA": ("lördagar",),
        "SU": ("söndagar",),
    },
    ordinals={
        1: ("första",),
        2: ("andra",),
        3: ("tredje",),
        4: ("fjärde",),
        -1: ("sista",),
    },
    periods={
        "DAILY": ("dag", "dagar"),
        "WEEKLY": ("vecka", "veckor"),
        "MONTHLY": ("månad", "månader"),
        "YEARLY": ("år",),
    },
    hour_units=("t", "tim", "timme", "timmar", "h"),
    minute_units=("m", "min", "minut", "minuter"),
    status_groups={
        "open": ("att göra", "öppen", "kvar", "todo", "väntande"),
        "in-progress": ("pågående", "arbetar", "gör", "i process", "under arbete"),
        "done": ("klar", "färdig", "slutförd", "avslutad", "gjord"),
        "cancelled": ("avbruten", "inställd", "avbokad"),
        "waiting": ("väntar", "blockerad", "pausad", "vilande"),
    },
    priority_groups={
        "urgent": ("brådskande", "kritisk", "högsta", "akut", "omedelbar"),
        "high": ("hög", "viktig", "förhöjd", "prioriterad"),
        "normal": ("normal", "medel", "standard", "vanlig"),
        "low": ("låg", "mindre", "minimal", "obetydlig"),
    },
)
