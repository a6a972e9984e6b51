from task_nlp.locales.types import LanguagePack

PACK = LanguagePack(
    code="fr",
    name="Français",
    date_locale="fr",
    due_triggers=("échéance", "date limite", "doit être terminé", "pour le", "avant le"),
    scheduled_triggers=("programmé pour", "programmé le", "commencer le", "débuter le", "travailler sur", "le"),
    frequencies={
        "DAILY": (
            "quotidien",
            "quotidienne",
            "quotidiennement",
            "chaque jour",
            "tous les jours",
            "journalier",
            "journalière",
        ),
        "WEEKLY": ("hebdomadaire", "chaque semaine", "toutes les semaines", "par semaine"),
        "MONTHLY": ("mensuel", "mensuelle", "mensuellement", "chaque mois", "tous les mois", "par mois"),
        "YEARLY": (
            "annuel",
            "annuelle",
            "annuellement",
            "chaque année",
            "tous les ans",
            "par an",
            "par année",
        ),
    },
    every=("chaque", "tous les", "toutes les"),
    other=("autre",),
    weekdays={
        "MO": ("lundi",),
        "TU": ("mardi",),
        "WE": ("mercredi",),
        "TH": ("jeudi",),
        "FR": ("vendredi",),
        "SA": ("samedi",),
        "SU": ("dimanche",),
    },
    plural_weekdays={
        "MO": ("lundis",),
        "TU": ("mardis",),
        "WE": ("mercredis",),
        "TH": ("jeudis",),
        "FR": ("vendredis",),
        "SA": ("samedis",),
        "SU": ("dimanches",),
    },
    ordinals={
        1: ("premier", "première"),
        2: ("deuxième", "second", "seconde"),
        3: ("troisième",),
        4: ("quatrième",),
        -1: ("dernier", "dernière"),
    },
    periods={
        "DAILY": ("jour", "jours"),
        "WEEKLY": ("semaine", "semaines"),
        "MONTHLY": ("mois",),
        "YEARLY": ("an", "ans", "année", "années"),
    },
    hour_units=("h", "hr", "hrs", "heure", "heures"),
    minute_units=("m", "min", "mins", "minute", "minutes"),
    status_groups={
        "open": ("à faire", "ouvert", "todo"),
        "in-progress": ("en cours", "en progression", "en train de faire"),
        "done": ("terminé", "fini", "accompli", "fait"),
        "cancelled": ("annulé", "abandonné"),
        "waiting": ("en attente", "bloqué", "suspendu"),
    },
    priority_groups={
        "urgent": ("urgent", "urgente", "critique", "maximum", "prioritaire"),
        "high": ("élevé", "élevée", "haut", "haute", "important", "importante", "supérieur", "supérieure"),
        "normal": ("moyen", "moyenne", "normal", "normale", "standard", "régulier", "régulière"),
        "low": ("faible", "bas", "basse", "mineur", "mineure", "minimum"),
    },
)
