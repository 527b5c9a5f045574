"""
Display Labels

Human-readable text for every enumerated value, in English and Chinese.
The scoring pipeline never reads these; they only decorate output records.
"""

from typing import Dict

from .constants import (
    CNTier,
    Locale,
    PGClass,
    QSTier,
    SubScore,
    UGClass,
    Verdict,
    WeightScheme,
)


VERDICT_LABELS: Dict[Locale, Dict[Verdict, str]] = {
    Locale.EN: {
        Verdict.HIGHLY_COMPETITIVE: "Highly competitive",
        Verdict.COMPETITIVE: "Competitive",
        Verdict.BORDERLINE: "Borderline - match-dependent",
        Verdict.NEEDS_STRENGTHENING: "Recommend strengthening your profile",
        Verdict.GATE_NOT_MET: "English requirement not met",
    },
    Locale.ZH: {
        Verdict.HIGHLY_COMPETITIVE: "竞争力极强",
        Verdict.COMPETITIVE: "具有竞争力",
        Verdict.BORDERLINE: "边缘/看匹配",
        Verdict.NEEDS_STRENGTHENING: "建议补强背景",
        Verdict.GATE_NOT_MET: "未达英语门槛",
    },
}

SUB_SCORE_LABELS: Dict[Locale, Dict[SubScore, str]] = {
    Locale.EN: {
        SubScore.ACADEMIC: "Academic background",
        SubScore.PROPOSAL: "Research proposal",
        SubScore.EXPERIENCE: "Research experience",
        SubScore.RECOMMENDATION: "Recommendation letters",
        SubScore.INTERVIEW: "Interview",
    },
    Locale.ZH: {
        SubScore.ACADEMIC: "学术背景",
        SubScore.PROPOSAL: "研究计划",
        SubScore.EXPERIENCE: "研究经历",
        SubScore.RECOMMENDATION: "推荐信",
        SubScore.INTERVIEW: "面试",
    },
}

IMPROVEMENT_TIPS: Dict[Locale, Dict[SubScore, str]] = {
    Locale.EN: {
        SubScore.ACADEMIC: "Strengthen grades, take more rigorous coursework and pick target institutions that match your background",
        SubScore.PROPOSAL: "Sharpen the proposal: highlight the novelty, detail methods and data, and make the fit with the supervisor's work explicit",
        SubScore.EXPERIENCE: "Build evidence: 6+ months as an RA, submissions to good venues, stronger first-author contributions",
        SubScore.RECOMMENDATION: "Secure strong letters that rank you among peers and describe your independent contributions",
        SubScore.INTERVIEW: "Prepare for the interview: in-depth research questions, structured answers, live reasoning practice",
    },
    Locale.ZH: {
        SubScore.ACADEMIC: "学术背景：完善成绩、提升课程强度并选择匹配目标的院校组合",
        SubScore.PROPOSAL: "优化研究计划：突出创新点、细化方法与数据、明确与导师课题的契合",
        SubScore.EXPERIENCE: "积累实证成果：RA ≥6个月、投稿优质会议/期刊、强化一作贡献",
        SubScore.RECOMMENDATION: "争取强力推荐：让推荐人写明你在同侪中的分位与独立贡献",
        SubScore.INTERVIEW: "准备面试：研究深度提问、结构化表达、现场推理演练",
    },
}

GATE_FAILED_MESSAGE: Dict[Locale, str] = {
    Locale.EN: "Meet the English requirement first (IELTS/TOEFL overall and per-section scores); applications below it are usually not sent to academic review.",
    Locale.ZH: "先满足英语要求（如 IELTS/TOEFL 单项与总分）—未达标通常不会进入学术评审。",
}

SUGGESTION_TEMPLATES: Dict[Locale, str] = {
    Locale.EN: "{key}: raising it to {target:g} gains about {gain:.2f}. Tip: {tip}",
    Locale.ZH: "{key}: 若提升到 {target:g} 分，增益约 {gain:.2f}。建议：{tip}",
}

SCHEME_LABELS: Dict[Locale, Dict[WeightScheme, str]] = {
    Locale.EN: {
        WeightScheme.DEFAULT: "Default (science / CS)",
        WeightScheme.ENGINEERING: "Applied engineering",
        WeightScheme.HUMANITIES: "Humanities & social sciences",
    },
    Locale.ZH: {
        WeightScheme.DEFAULT: "默认（理工/CS）",
        WeightScheme.ENGINEERING: "工程应用型",
        WeightScheme.HUMANITIES: "人文社科",
    },
}

UG_CLASS_LABELS: Dict[Locale, Dict[UGClass, str]] = {
    Locale.EN: {
        UGClass.FIRST: "First",
        UGClass.UPPER: "Upper second (2:1)",
        UGClass.LOWER: "Lower second (2:2)",
        UGClass.THIRD: "Third",
        UGClass.OTHER: "Other",
    },
    Locale.ZH: {
        UGClass.FIRST: "一等 First",
        UGClass.UPPER: "二等一 2:1",
        UGClass.LOWER: "二等二 2:2",
        UGClass.THIRD: "Third",
        UGClass.OTHER: "其他",
    },
}

PG_CLASS_LABELS: Dict[Locale, Dict[PGClass, str]] = {
    Locale.EN: {
        PGClass.DISTINCTION: "Distinction",
        PGClass.MERIT: "Merit",
        PGClass.PASS: "Pass",
        PGClass.OTHER: "Other",
    },
    Locale.ZH: {
        PGClass.DISTINCTION: "Distinction",
        PGClass.MERIT: "Merit",
        PGClass.PASS: "Pass",
        PGClass.OTHER: "其他",
    },
}

QS_TIER_LABELS: Dict[Locale, Dict[QSTier, str]] = {
    Locale.EN: {
        QSTier.TOP_10: "QS Top 10",
        QSTier.RANK_11_20: "QS 11-20",
        QSTier.RANK_21_50: "QS 21-50",
        QSTier.RANK_51_100: "QS 51-100",
        QSTier.RANK_101_200: "QS 101-200",
        QSTier.RANK_201_300: "QS 201-300",
        QSTier.RANK_301_500: "QS 301-500",
        QSTier.RANK_501_800: "QS 501-800",
        QSTier.RANK_800_PLUS: "QS 800+ / unranked",
    },
    Locale.ZH: {
        QSTier.TOP_10: "QS Top 10",
        QSTier.RANK_11_20: "QS 11–20",
        QSTier.RANK_21_50: "QS 21–50",
        QSTier.RANK_51_100: "QS 51–100",
        QSTier.RANK_101_200: "QS 101–200",
        QSTier.RANK_201_300: "QS 201–300",
        QSTier.RANK_301_500: "QS 301–500",
        QSTier.RANK_501_800: "QS 501–800",
        QSTier.RANK_800_PLUS: "QS 800+ / 无",
    },
}

CN_TIER_LABELS: Dict[Locale, Dict[CNTier, str]] = {
    Locale.EN: {
        CNTier.C9: "C9 / top 985",
        CNTier.PROJECT_985: "Other 985",
        CNTier.PROJECT_211: "211 / Double First-Class",
        CNTier.TIER_ONE: "Other tier-one",
        CNTier.BELOW_TIER_ONE: "Below tier-one",
    },
    Locale.ZH: {
        CNTier.C9: "C9 / 顶尖985",
        CNTier.PROJECT_985: "其他 985",
        CNTier.PROJECT_211: "211 / 双一流",
        CNTier.TIER_ONE: "双非一本",
        CNTier.BELOW_TIER_ONE: "一本以下",
    },
}

RIGOR_LABELS: Dict[Locale, Dict[str, str]] = {
    Locale.EN: {"general": "General", "medium": "Medium", "high": "High"},
    Locale.ZH: {"general": "一般", "medium": "中", "high": "高"},
}
