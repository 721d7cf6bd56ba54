"""Hard-coded plan shown before any AI plan has been merged."""

from weekwise.schemas.plan import TrainingStrategy

DEFAULT_TITLE = {
    "zh": "健身爱好者平衡型周训练计划",
    "en": "Balanced Weekly Training Plan for Fitness Enthusiasts",
}

DEFAULT_DAYS: dict[str, dict[str, dict[str, str]]] = {
    "zh": {
        "monday": {
            "content": (
                "上半身力量训练（胸、背、肩）\n"
                "- 热身：动态拉伸5分钟\n"
                "- 杠铃卧推 4组×8-10次\n"
                "- 哑铃划船 4组×10次\n"
                "- 哑铃肩推 3组×12次\n"
                "- 俯卧撑 3组×15次\n"
                "- 结束拉伸5分钟"
            ),
            "duration": "60分钟",
            "notes": "重点关注动作规范，重量可根据个人能力调整。",
        },
        "tuesday": {
            "content": (
                "有氧训练（间歇跑）\n"
                "- 热身慢跑5分钟\n"
                "- 高强度间歇跑（1分钟快跑+2分钟慢走/慢跑，循环5次）\n"
                "- 冷身走路5分钟\n"
                "- 拉伸5分钟"
            ),
            "duration": "45分钟",
            "notes": "提升心肺耐力，注意呼吸节奏。",
        },
        "wednesday": {
            "content": (
                "下半身力量训练（腿、臀）\n"
                "- 热身：动态拉伸5分钟\n"
                "- 深蹲 4组×10次\n"
                "- 硬拉 4组×8次\n"
                "- 弓步蹲 3组×12次（每腿）\n"
                "- 臀桥 3组×15次\n"
                "- 结束拉伸5分钟"
            ),
            "duration": "60分钟",
            "notes": "注意膝盖、腰部保护，动作标准。",
        },
        "thursday": {
            "content": (
                "核心训练+低强度有氧\n"
                "- 热身：动态拉伸5分钟\n"
                "- 仰卧卷腹 3组×20次\n"
                "- 平板支撑 3组×45秒\n"
                "- 俄罗斯转体 3组×15次\n"
                "- 有氧：快走或慢跑30分钟\n"
                "- 拉伸5分钟"
            ),
            "duration": "60分钟",
            "notes": "核心训练结合低强度有氧，增强稳定性。",
        },
        "friday": {
            "content": (
                "全身综合力量训练\n"
                "- 热身：动态拉伸5分钟\n"
                "- 复合动作循环3组：\n"
                "   - 俯身划船 12次\n"
                "   - 硬拉 10次\n"
                "   - 俯卧撑 15次\n"
                "   - 深蹲 12次\n"
                "- 结束拉伸5分钟"
            ),
            "duration": "60分钟",
            "notes": "循环训练提升心率和整体力量，间歇30-60秒。",
        },
        "saturday": {
            "content": (
                "有氧训练（户外骑行或游泳）\n"
                "- 热身5分钟\n"
                "- 骑行或游泳40分钟（保持中等强度）\n"
                "- 拉伸5分钟"
            ),
            "duration": "50分钟",
            "notes": "选择喜欢的有氧方式，保持轻松愉快。",
        },
        "sunday": {
            "content": (
                "恢复与放松\n"
                "- 轻柔拉伸15分钟\n"
                "- 泡沫轴放松10分钟\n"
                "- 冥想或呼吸训练10分钟"
            ),
            "duration": "35分钟",
            "notes": "专注身体恢复，有助于下周训练。",
        },
    },
    "en": {
        "monday": {
            "content": (
                "Upper-body strength (chest, back, shoulders)\n"
                "- Warm-up: dynamic stretching 5 min\n"
                "- Barbell bench press 4×8-10\n"
                "- Dumbbell row 4×10\n"
                "- Dumbbell shoulder press 3×12\n"
                "- Push-ups 3×15\n"
                "- Cool-down stretching 5 min"
            ),
            "duration": "60 min",
            "notes": "Focus on form; adjust the weights to your level.",
        },
        "tuesday": {
            "content": (
                "Cardio (interval running)\n"
                "- Warm-up jog 5 min\n"
                "- Intervals: 1 min fast + 2 min walk/jog, 5 rounds\n"
                "- Cool-down walk 5 min\n"
                "- Stretching 5 min"
            ),
            "duration": "45 min",
            "notes": "Builds endurance; keep your breathing steady.",
        },
        "wednesday": {
            "content": (
                "Lower-body strength (legs, glutes)\n"
                "- Warm-up: dynamic stretching 5 min\n"
                "- Squats 4×10\n"
                "- Deadlifts 4×8\n"
                "- Lunges 3×12 (each leg)\n"
                "- Glute bridges 3×15\n"
                "- Cool-down stretching 5 min"
            ),
            "duration": "60 min",
            "notes": "Protect knees and lower back; keep the movements clean.",
        },
        "thursday": {
            "content": (
                "Core + low-intensity cardio\n"
                "- Warm-up: dynamic stretching 5 min\n"
                "- Crunches 3×20\n"
                "- Plank 3×45 s\n"
                "- Russian twists 3×15\n"
                "- Cardio: brisk walk or easy jog 30 min\n"
                "- Stretching 5 min"
            ),
            "duration": "60 min",
            "notes": "Core work plus easy cardio for stability.",
        },
        "friday": {
            "content": (
                "Full-body strength circuit\n"
                "- Warm-up: dynamic stretching 5 min\n"
                "- 3 rounds:\n"
                "   - Bent-over row 12\n"
                "   - Deadlift 10\n"
                "   - Push-ups 15\n"
                "   - Squats 12\n"
                "- Cool-down stretching 5 min"
            ),
            "duration": "60 min",
            "notes": "Circuits raise heart rate and overall strength; rest 30-60 s.",
        },
        "saturday": {
            "content": (
                "Cardio (outdoor cycling or swimming)\n"
                "- Warm-up 5 min\n"
                "- Cycling or swimming 40 min at moderate intensity\n"
                "- Stretching 5 min"
            ),
            "duration": "50 min",
            "notes": "Pick the cardio you enjoy and keep it relaxed.",
        },
        "sunday": {
            "content": (
                "Recovery and relaxation\n"
                "- Gentle stretching 15 min\n"
                "- Foam rolling 10 min\n"
                "- Meditation or breathing 10 min"
            ),
            "duration": "35 min",
            "notes": "Focus on recovery to get ready for next week.",
        },
    },
}

DEFAULT_TIPS = {
    "zh": [
        "每组之间休息30-90秒，根据训练强度适当调整。",
        "注意补充水分，训练前后适量摄入蛋白质。",
        "若感到疲劳或不适，可适当调整训练量或休息。",
        "训练动作要规范，避免因追求重量而牺牲动作质量。",
    ],
    "en": [
        "Rest 30-90 seconds between sets, adjusted to the intensity.",
        "Stay hydrated and get enough protein before and after training.",
        "If you feel tired or unwell, reduce the volume or take a rest day.",
        "Keep good form; never trade technique for heavier weights.",
    ],
}

DEFAULT_STRATEGIES = {
    "zh": [
        TrainingStrategy(title="渐进式负荷", description="每周可适当增加训练重量或组数"),
        TrainingStrategy(title="多样化训练", description="力量与有氧结合，避免训练疲劳"),
        TrainingStrategy(title="充分恢复", description="保证充足睡眠，有助肌肉修复"),
        TrainingStrategy(title="动作规范", description="安全和动作质量为主要优先级"),
        TrainingStrategy(title="有氧力量结合", description="两者结合效果最佳"),
        TrainingStrategy(title="早晨训练", description="坚持4周即可形成习惯"),
        TrainingStrategy(title="心理建设", description="完成后打勾增强成就感"),
        TrainingStrategy(title="强度管理", description="专注于完成动作和呼吸"),
    ],
    "en": [
        TrainingStrategy(title="Progressive overload", description="Add a little weight or an extra set each week"),
        TrainingStrategy(title="Variety", description="Mix strength and cardio to avoid burnout"),
        TrainingStrategy(title="Recovery", description="Sleep well so your muscles can repair"),
        TrainingStrategy(title="Proper form", description="Safety and movement quality come first"),
        TrainingStrategy(title="Cardio plus strength", description="The combination works best"),
        TrainingStrategy(title="Morning sessions", description="Four weeks is enough to build the habit"),
        TrainingStrategy(title="Mindset", description="Tick off each day to feel the progress"),
        TrainingStrategy(title="Intensity control", description="Focus on completing the movement and breathing"),
    ],
}
