from task_nlp.locales.types import LanguagePack

PACK = LanguagePack(
    code="en",
    name="English",
    date_locale="en",
    due_triggers=("due", "deadline", "must be done by", "by"),
    scheduled_triggers=("scheduled for", "start on", "begin on", "work on", "on"),
    frequencies={
        "DAILY": ("daily", "every day"),
        "WEEKLY": ("weekly", "every week"),
        "MONTHLY": ("monthly", "every month"),
        "YEARLY": ("yearly", "annually", "every year"),
    },
    every=("every",),
    other=("other",),
    weekdays={
        "MO": ("monday",),
        "TU": ("tuesday",),
        "WE": ("wednesday",),
        "TH": ("thursday",),
        "FR": ("friday",),
        "SA": ("saturday",),
        "SU": ("sunday",),
    },
    plural_weekdays={
        "MO": ("mondays",),
        "TU": ("tuesdays",),
        "WE": ("wednesdays",),
        "TH": ("thursdays",),
        "FR": ("fridays",),
        "SA": ("saturdays",),
        "SU": ("sundays",),
    },
    ordinals={
        1: ("first",),
        2: ("second",),
        3: ("third",),
        4: ("fourth",),
        -1: ("last",),
    },
    periods={
        "DAILY": ("day", "days"),
        "WEEKLY": ("week", "weeks"),
        "MONTHLY": ("month", "months"),
        "YEARLY": ("year", "years"),
    },
    hour_units=("h", "hr", "hrs", "hour", "hours"),
    minute_units=("m", "min", "mins", "minute", "minutes"),
    status_groups={
        "open": ("todo", "to do", "open"),
        "in-progress": ("in progress", "in-progress", "doing"),
        "done": ("done", "completed", "finished"),
        "cancelled": ("cancelled", "canceled"),
        "waiting": ("waiting", "blocked", "on hold"),
    },
    priority_groups={
        "urgent": ("urgent", "critical", "highest", "urgent priority", "highest priority"),
        "high": ("high", "important", "high priority"),
        "normal": ("medium", "normal", "medium priority", "normal priority"),
        "low": ("low", "minor", "low priority"),
    },
)
