from task_nlp.locales.types import LanguagePack

PACK = LanguagePack(
    code="pt",
    name="Português",
    date_locale="pt",
    due_triggers=("vencimento", "prazo", "deve estar pronto até", "até", "limite"),
    scheduled_triggers=("programado para", "agendado para", "começar em", "trabalhar em", "em", "no"),
    frequencies={
        "DAILY": ("diário", "diária", "diariamente", "todos os dias", "cada dia", "por dia"),
        "WEEKLY": ("semanal", "semanalmente", "toda semana", "todas as semanas", "por semana"),
        "MONTHLY": ("mensal", "mensalmente", "todo mês", "todos os meses", "por mês"),
        "YEARLY": ("anual", "anualmente", "todo ano", "todos os anos", "por ano"),
    },
    every=("todo", "toda", "todos", "todas", "cada"),
    other=("outro", "outra", "outros", "outras"),
    weekdays={
        "MO": ("segunda", "segunda-feira"),
        "TU": ("terça", "terça-feira"),
        "WE": ("quarta", "quarta-feira"),
        "TH": ("quinta", "quinta-feira"),
        "FR": ("sexta", "sexta-feira"),
        "SA": ("sábado",),
        "SU": ("domingo",),
    },
    plural_weekdays={
        "MO": ("segundas", "segundas-feiras"),
        "TU": ("terças", "terças-feiras"),
        "WE": ("quartas", "quartas-feiras"),
        "TH": ("quintas", "quintas-feiras"),
        "FR": ("sextas", "sextas-feiras"),
        "SA": ("sábados",),
        "SU": ("domingos",),
    },
    ordinals={
        1: ("primeiro", "primeira"),
        2: ("segundo", "segunda"),
        3: ("terceiro", "terceira"),
        4: ("quarto", "quarta"),
        -1: ("último", "última"),
    },
    periods={
        "DAILY": ("dia", "dias"),
        "WEEKLY": ("semana", "semanas"),
        "MONTHLY": ("mês", "meses"),
        "YEARLY": ("ano", "anos"),
    },
    hour_units=("h", "hr", "hora", "horas"),
    minute_units=("m", "min", "minuto", "minutos"),
    status_groups={
        "open": ("a fazer", "pendente", "aberto", "todo", "por fazer"),
        "in-progress": ("em andamento", "em progresso", "fazendo", "trabalhando", "executando"),
        "done": ("feito", "concluído", "terminado", "finalizado", "completo"),
        "cancelled": ("cancelado", "anulado", "suspenso"),
        "waiting": ("aguardando", "esperando", "bloqueado", "em espera"),
    },
    priority_groups={
        "urgent": ("urgente", "crítico", "crítica", "máximo", "máxima", "prioritário", "prioritária"),
        "high": ("alto", "alta", "importante", "elevado", "elevada"),
        "normal": ("médio", "média", "normal", "regular", "padrão"),
        "low": ("baixo", "baixa", "menor", "mínimo", "mínima"),
    },
)
