from task_nlp.locales.types import LanguagePack

PACK = LanguagePack(
    code="zh",
    name="中文",
    date_locale="zh",
    due_triggers=("截止", "到期", "期限", "之前"),
    scheduled_triggers=("安排在", "计划在", "开始在", "在"),
    frequencies={
        "DAILY": ("每天", "每日", "天天", "日常"),
        "WEEKLY": ("每周", "每星期", "周周"),
        "MONTHLY": ("每月", "每个月", "月月"),
        "YEARLY": ("每年", "年年", "每一年"),
    },
    every=("每", "每个", "每一个"),
    other=("其他", "另一个"),
    weekdays={
        "MO": ("周一", "星期一", "礼拜一"),
        "TU": ("周二", "星期二", "礼拜二"),
        "WE": ("周三", "星期三", "礼拜三"),
        "TH": ("周四", "星期四", "礼拜四"),
        "FR": ("周五", "星期五", "礼拜五"),
        "SA": ("周六", "星期六", "礼拜六"),
        "SU": ("周日", "星期日", "礼拜日"),
    },
    plural_weekdays={},
    ordinals={
        1: ("第一个", "第一", "首个"),
        2: ("第二个", "第二"),
        3: ("第三个", "第三"),
        4: ("第四个", "第四"),
        -1: ("最后一个", "最后", "末尾"),
    },
    periods={
        "DAILY": ("天", "日"),
        "WEEKLY": ("周", "星期", "礼拜"),
        "MONTHLY": ("月", "个月"),
        "YEARLY": ("年",),
    },
    hour_units=("小时", "时", "个小时"),
    minute_units=("分钟", "分", "个分钟"),
    status_groups={
        "open": ("待办", "未完成", "开放", "新建"),
        "in-progress": ("进行中", "正在处理", "处理中", "工作中"),
        "done": ("完成", "已完成", "结束", "搞定"),
        "cancelled": ("取消", "已取消", "废弃"),
        "waiting": ("等待", "暂停", "阻塞", "待定"),
    },
    priority_groups={
        "urgent": ("紧急", "急迫", "立即", "马上"),
        "high": ("高", "重要", "优先", "高优先级"),
        "normal": ("正常", "普通", "中等", "标准"),
        "low": ("低", "不重要", "低优先级", "次要"),
    },
    compact_script=True,
)
