from task_nlp.locales.types import LanguagePack

PACK = LanguagePack(
    code="uk",
    name="Українська",
    date_locale="uk",
    due_triggers=("термін", "дедлайн", "до"),
    scheduled_triggers=("заплановано на", "почати", "на", "у"),
    frequencies={
        "DAILY": ("щодня", "щоденно", "кожен день", "кожного дня"),
        "WEEKLY": ("щотижня", "щотижнево", "кожен тиждень", "кожного тижня"),
        "MONTHLY": ("щомісяця", "щомісячно", "кожен місяць", "кожного місяця"),
        "YEARLY": ("щороку", "щорічно", "кожен рік", "кожного року"),
    },
    every=("кожен", "кожну", "кожне", "кожні", "кожного"),
    other=("другий", "другу", "друге"),
    weekdays={
        "MO": ("понеділок",),
        "TU": ("вівторок",),
        "WE": ("середу", "середа"),
        "TH": ("четвер",),
        "FR": ("пʼятницю", "п'ятницю", "пʼятниця", "п'ятниця"),
        "SA": ("суботу", "субота"),
        "SU": ("неділю", "неділя"),
    },
    plural_weekdays={
        "MO": ("по понеділках",),
        "TU": ("по вівторках",),
        "WE": ("по середах",),
        "TH": ("по четвергах",),
        "FR": ("по пʼятницях", "по п'ятницях"),
        "SA": ("по суботах",),
        "SU": ("по неділях",),
    },
    ordinals={
        1: ("перший", "першу", "перше"),
        2: ("другий", "другу", "друге"),
        3: ("третій", "третю", "третє"),
        4: ("четвертий", "четверту", "четверте"),
        -1: ("останній", "останню", "останнє"),
    },
    periods={
        "DAILY": ("день", "дні", "днів"),
        "WEEKLY": ("тиждень", "тижні", "тижнів"),
        "MONTHLY": ("місяць", "місяці", "місяців"),
        "YEARLY": ("рік", "роки", "років"),
    },
    hour_units=("год", "година", "години", "годин"),
    minute_units=("хв", "хвилина", "хвилини", "хвилин", "хвилину"),
    status_groups={
        "open": ("відкрито", "відкрита", "до виконання"),
        "in-progress": ("в процесі", "в роботі", "виконується"),
        "done": ("виконано", "готово", "зроблено", "завершено"),
        "cancelled": ("скасовано",),
        "waiting": ("очікування", "очікує", "заблоковано", "на паузі"),
    },
    priority_groups={
        "urgent": ("терміново", "терміновий", "термінова", "критично"),
        "high": ("високий", "висока", "важливо", "важливий", "важлива"),
        "normal": ("середній", "середня", "звичайний", "звичайна"),
        "low": ("низький", "низька", "неважливо"),
    },
)
