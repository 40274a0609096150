"""Display strings for the English and Arabic interfaces."""

from typing import Dict

LOCALIZATION: Dict[str, Dict] = {
    "en": {
        "title": "MARI",
        "subtitle": "AI agent for structured learning in Algeria",
        "goalLabel": "Learning Goal",
        "goalPlaceholder": "e.g., Master Full-stack Development, Learn USTHB Data Structures module",
        "deadlineLabel": "Target Deadline",
        "deadlinePlaceholder": "YYYY-MM-DD",
        "levelLabel": "Current Level",
        "availabilityLabel": "Availability (Hours/Week)",
        "generateButton": "Generate Learning Path",
        "generatingText": "Synthesizing local data...",
        "stepsTitle": "Your Structured Timeline",
        "universityModulesTag": "Uni Module",
        "partneredAcademyTag": "Academy",
        "courseLinkLabel": "Open course",
        "progressTitle": "Your Progress",
        "completedLabel": "Mark completed steps",
        "noData": "Share your goal to start your journey.",
        "chatTitle": "Career Concierge",
        "chatPlaceholder": "Type a message...",
        "chatEmpty": "Ask me about universities, careers, or your path.",
        "chatOpen": "💬 Open Career Concierge",
        "chatClose": "✖ Close",
        "sendButton": "Send",
        "darkModeButton": "🌓 Dark mode",
        "languageLabel": "Language",
        "levels": {
            "beginner": "Beginner",
            "intermediate": "Intermediate",
            "advanced": "Advanced",
        },
    },
    "ar": {
        "title": "ماري",
        "subtitle": "وكيل الذكاء الاصطناعي للتعلم الممنهج في الجزائر",
        "goalLabel": "هدف التعلم",
        "goalPlaceholder": "مثال: إتقان تطوير الويب الشامل، دراسة وحدة هياكل البيانات في USTHB",
        "deadlineLabel": "الموعد النهائي",
        "deadlinePlaceholder": "YYYY-MM-DD",
        "levelLabel": "المستوى الحالي",
        "availabilityLabel": "التوفر (ساعة/أسبوع)",
        "generateButton": "إنشاء مسار التعلم",
        "generatingText": "جاري تجميع البيانات المحلية...",
        "stepsTitle": "الجدول الزمني الممنهج",
        "universityModulesTag": "وحدة جامعية",
        "partneredAcademyTag": "أكاديمية",
        "courseLinkLabel": "فتح الدورة",
        "progressTitle": "تقدمك",
        "completedLabel": "حدد الخطوات المكتملة",
        "noData": "حدد هدفك لبدء رحلتك.",
        "chatTitle": "مستشار المسار",
        "chatPlaceholder": "اكتب رسالتك...",
        "chatEmpty": "اسألني عن الجامعات، الوظائف، أو مسارك الدراسي.",
        "chatOpen": "💬 افتح مستشار المسار",
        "chatClose": "✖ إغلاق",
        "sendButton": "إرسال",
        "darkModeButton": "🌓 الوضع الداكن",
        "languageLabel": "اللغة",
        "levels": {
            "beginner": "مبتدئ",
            "intermediate": "متوسط",
            "advanced": "متقدم",
        },
    },
}

SUPPORTED_LANGUAGES = list(LOCALIZATION.keys())


def _lang_value(lang) -> str:
    return getattr(lang, "value", lang)


def get_strings(lang) -> Dict:
    """Return the string table for a language, falling back to English."""
    return LOCALIZATION.get(_lang_value(lang), LOCALIZATION["en"])


def is_rtl(lang) -> bool:
    return _lang_value(lang) == "ar"
