"""User-facing strings, keyed by language."""

from weekwise.utils.constants import DEFAULT_LANGUAGE

ERROR_MESSAGES: dict[str, dict[str, str]] = {
    "zh": {
        "validation": "消息内容不能为空",
        "rate_limit": "请求过于频繁，请稍后再试。",
        "service_unavailable": "AI服务暂时不可用，请稍后再试。",
        "auth_error": "AI服务认证失败，请检查访问令牌配置。",
        "quota_exceeded": "AI服务使用额度已用完，请稍后再试。",
        "unknown": "服务器内部错误",
    },
    "en": {
        "validation": "Message content cannot be empty",
        "rate_limit": "Too many requests. Please try again later.",
        "service_unavailable": "AI service is temporarily unavailable. Please try again later.",
        "auth_error": "AI service authentication failed. Please check the access token.",
        "quota_exceeded": "AI service quota has been used up. Please try again later.",
        "unknown": "Internal server error",
    },
}

DEFAULT_PLAN_REQUEST: dict[str, str] = {
    "zh": "请生成一个通用的周训练计划",
    "en": "Please generate a general weekly training plan",
}

CHAT_TEXT: dict[str, dict[str, str]] = {
    "zh": {
        "title": "weekwise",
        "subtitle": "智能生成你的每周训练计划，把进步贴在墙上，一周一小步。",
        "welcome": (
            "哈喽！我是你的健身伙伴weekwise 🏋🏻‍♂️\n"
            "告诉我你的目标，我会帮你制定一个属于你的每周训练计划。\n\n"
            "你可以这样告诉我：\n\n"
            "\"我想减脂但不想太累\"\n"
            "\"我最近在练CrossFit，想更系统地安排训练\"\n"
            "\"我想改善体态，多练核心和背部\"\n"
            "\"我没有器械，只能在家练\"\n\n"
            "或者，直接和我聊聊：\n\n"
            "\"我想变得更有力量。\"\n"
            "\"我希望能坚持下来，不再半途而废。\"\n\n"
            "我会倾听，然后帮你把目标变成一个可以贴在墙上的计划 🧾💪"
        ),
        "apology": "抱歉，AI服务暂时不可用。请稍后再试。",
        "completed_title": "训练计划已生成！",
        "completed_subtitle": "想调整内容吗？直接点击就能修改，准备好后从右上角打印吧。🌱",
        "print_button": "打印周健身计划",
        "request_failed": "聊天请求失败",
        "generate_failed": "生成训练计划失败",
        "health_failed": "健康检查失败",
    },
    "en": {
        "title": "weekwise",
        "subtitle": "Talk. Train. Transform.",
        "welcome": (
            "Hello! I'm Weekwise, your fitness buddy 🏋🏻‍♂️\n"
            "Tell me your goals and I'll create a weekly training plan just for you.\n\n"
            "You can tell me things like:\n\n"
            "\"I want to lose fat without overtraining myself.\"\n"
            "\"I've been doing CrossFit lately and want a more structured approach.\"\n"
            "\"I want to improve my posture and focus on my core and back.\"\n"
            "\"I don't have any equipment, so I can only train at home.\"\n\n"
            "Or, just chat with me:\n\n"
            "\"I want to get stronger.\"\n"
            "\"I hope to stick with it and not give up halfway.\"\n\n"
            "I'll listen and help you turn your goals into a plan you can post on your wall 🧾💪"
        ),
        "apology": "Sorry, AI service is temporarily unavailable. Please try again later.",
        "completed_title": "Training Plan Generated!",
        "completed_subtitle": (
            "Want to adjust the content? Just click to modify it, "
            "and print it from the top right corner when you are ready. 🌱"
        ),
        "print_button": "Print Weekly Fitness Plan",
        "request_failed": "Chat request failed",
        "generate_failed": "Failed to generate training plan",
        "health_failed": "Health check failed",
    },
}

POSTER_TEXT: dict[str, dict[str, str]] = {
    "zh": {
        "content": "训练内容",
        "duration": "时长",
        "notes": "重点/备注",
        "done": "完成",
        "tips": "💡 每日训练提示",
        "strategies": "🎯 关键策略",
    },
    "en": {
        "content": "Training",
        "duration": "Duration",
        "notes": "Focus / Notes",
        "done": "Done",
        "tips": "💡 Daily Training Tips",
        "strategies": "🎯 Key Strategies",
    },
}


def localized(table: dict[str, dict[str, str]], language: str, key: str) -> str:
    """Look up ``key`` for ``language``, falling back to the default language."""
    return table.get(language, table[DEFAULT_LANGUAGE])[key]
