from task_nlp.locales.types import LanguagePack

PACK = LanguagePack(
    code="ja",
    name="日本語",
    date_locale="ja",
    due_triggers=("期限", "締切", "〆切", "までに", "まで"),
    scheduled_triggers=("予定", "計画", "開始", "から"),
    frequencies={
        "DAILY": ("毎日", "日々", "毎日毎日", "連日"),
        "WEEKLY": ("毎週", "週毎", "週一", "毎週毎週"),
        "MONTHLY": ("毎月", "月毎", "月一", "毎月毎月"),
        "YEARLY": ("毎年", "年毎", "年一", "毎年毎年", "年次"),
    },
    every=("毎", "各", "全て"),
    other=("他の", "別の", "異なる"),
    weekdays={
        "MO": ("月曜日", "月曜", "げつようび"),
        "TU": ("火曜日", "火曜", "かようび"),
        "WE": ("水曜日", "水曜", "すいようび"),
        "TH": ("木曜日", "木曜", "もくようび"),
        "FR": ("金曜日", "金曜", "きんようび"),
        "SA": ("土曜日", "土曜", "どようび"),
        "SU": ("日曜日", "日曜", "にちようび"),
    },
    plural_weekdays={},
    ordinals={
        1: ("最初の", "第一の", "一番目の", "初回"),
        2: ("二番目の", "第二の"),
        3: ("三番目の", "第三の"),
        4: ("四番目の", "第四の"),
        -1: ("最後の", "最終の", "終わりの"),
    },
    periods={
        "DAILY": ("日", "日間"),
        "WEEKLY": ("週", "週間"),
        "MONTHLY": ("月", "月間", "ヶ月"),
        "YEARLY": ("年", "年間"),
    },
    hour_units=("時間", "時", "じかん"),
    minute_units=("分", "分間", "ふん", "ぷん"),
    status_groups={
        "open": ("未着手", "新規", "オープン", "開始前"),
        "in-progress": ("進行中", "作業中", "実行中", "処理中", "進行"),
        "done": ("完了", "終了", "済み", "終わり", "達成"),
        "cancelled": ("キャンセル", "中止", "取消", "廃止", "停止"),
        "waiting": ("待機", "保留", "ブロック", "一時停止", "待ち"),
    },
    priority_groups={
        "urgent": ("緊急", "至急", "急務", "最優先", "すぐに"),
        "high": ("高", "重要", "優先", "高優先度", "重点"),
        "normal": ("普通", "通常", "標準", "一般", "ノーマル"),
        "low": ("低", "軽微", "後回し", "低優先度", "余裕"),
    },
    compact_script=True,
)
