from task_nlp.locales.types import LanguagePack

PACK = LanguagePack(
    code="es",
    name="Español",
    date_locale="es",
    due_triggers=("vence", "fecha límite", "debe terminarse", "para el", "antes del"),
    scheduled_triggers=("programado para", "programado el", "comenzar el", "empezar el", "trabajar en", "el"),
    frequencies={
        "DAILY": ("diario", "diaria", "diariamente", "cada día", "todos los días", "a diario"),
        "WEEKLY": ("semanal", "semanalmente", "cada semana", "todas las semanas", "por semana"),
        "MONTHLY": ("mensual", "mensualmente", "cada mes", "todos los meses", "por mes"),
        "YEARLY": ("anual", "anualmente", "cada año", "todos los años", "por año"),
    },
    every=("cada", "todos los", "todas las"),
    other=("otro", "otra"),
    weekdays={
        "MO": ("lunes",),
        "TU": ("martes",),
        "WE": ("miércoles",),
        "TH": ("jueves",),
        "FR": ("viernes",),
        "SA": ("sábado",),
        "SU": ("domingo",),
    },
    plural_weekdays={
        "SA": ("sábados",),
        "SU": ("domingos",),
    },
    ordinals={
        1: ("primer", "primera", "primero"),
        2: ("segundo", "segunda"),
        3: ("tercer", "tercera", "tercero"),
        4: ("cuarto", "cuarta"),
        -1: ("último", "última"),
    },
    periods={
        "DAILY": ("día", "días"),
        "WEEKLY": ("semana", "semanas"),
        "MONTHLY": ("mes", "meses"),
        "YEARLY": ("año", "años"),
    },
    hour_units=("h", "hr", "hrs", "hora", "horas"),
    minute_units=("m", "min", "mins", "minuto", "minutos"),
    status_groups={
        "open": ("pendiente", "por hacer", "abierto", "todo"),
        "in-progress": ("en progreso", "en curso", "haciendo", "trabajando"),
        "done": ("hecho", "terminado", "completado", "finalizado"),
        "cancelled": ("cancelado", "anulado"),
        "waiting": ("esperando", "bloqueado", "en espera"),
    },
    priority_groups={
        "urgent": ("urgente", "crítico", "crítica", "máximo", "máxima", "prioritario", "prioritaria"),
        "high": ("alto", "alta", "importante", "elevado", "elevada"),
        "normal": ("medio", "media", "normal", "regular", "estándar"),
        "low": ("bajo", "baja", "menor", "mínimo", "mínima"),
    },
)
