from task_nlp.locales.types import LanguagePack

PACK = LanguagePack(
    code="ru",
    name="Русский",
    date_locale="ru",
    due_triggers=("срок", "дедлайн", "до"),
    scheduled_triggers=("запланировано на", "начать", "на", "в"),
    frequencies={
        "DAILY": ("ежедневно", "каждый день", "каждодневно"),
        "WEEKLY": ("еженедельно", "каждую неделю"),
        "MONTHLY": ("ежемесячно", "каждый месяц"),
        "YEARLY": ("ежегодно", "каждый год"),
    },
    every=("каждый", "каждую", "каждое", "каждые", "каждого"),
    other=("второй", "вторую", "второе"),
    weekdays={
        "MO": ("понедельник",),
        "TU": ("вторник",),
        "WE": ("среду", "среда"),
        "TH": ("четверг",),
        "FR": ("пятницу", "пятница"),
        "SA": ("субботу", "суббота"),
        "SU": ("воскресенье",),
    },
    plural_weekdays={
        "MO": ("по понедельникам",),
        "TU": ("по вторникам",),
        "WE": ("по средам",),
        "TH": ("по четвергам",),
        "FR": ("по пятницам",),
        "SA": ("по субботам",),
        "SU": ("по воскресеньям",),
    },
    ordinals={
        1: ("первый", "первую", "первое"),
        2: ("второй", "вторую", "второе"),
        3: ("третий", "третью", "третье"),
        4: ("четвёртый", "четвертый", "четвёртую", "четвертую"),
        -1: ("последний", "последнюю", "последнее"),
    },
    periods={
        "DAILY": ("день", "дня", "дней"),
        "WEEKLY": ("неделю", "недели", "недель"),
        "MONTHLY": ("месяц", "месяца", "месяцев"),
        "YEARLY": ("год", "года", "лет"),
    },
    hour_units=("ч", "час", "часа", "часов"),
    minute_units=("м", "мин", "минута", "минуты", "минут", "минуту"),
    status_groups={
        "open": ("открыто", "открыта", "к выполнению"),
        "in-progress": ("в процессе", "в работе", "выполняется"),
        "done": ("выполнено", "готово", "сделано", "завершено"),
        "cancelled": ("отменено", "отменена"),
        "waiting": ("ожидание", "ожидает", "заблокировано", "на паузе"),
    },
    priority_groups={
        "urgent": ("срочно", "срочный", "срочная", "критично", "критический"),
        "high": ("высокий", "высокая", "важно", "важный", "важная"),
        "normal": ("средний", "средняя", "обычный", "обычная", "нормальный"),
        "low": ("низкий", "низкая", "неважно", "несрочно"),
    },
)
