"""
语音合成文本清理

将 AI 导师消息转为适合 TTS 朗读的文本：表情转文字、去 markdown 和学习标记、
清理重复符号、替换特殊字符、规范停顿与空白。

与 `strip_formatting` 不同，这里面向朗读效果，会主动删除词汇/翻译等标记。
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from tutor_markup.config import get_config_manager

logger = logging.getLogger(__name__)


# 常见表情到朗读文本的映射
EMOJI_MAP: Dict[str, str] = {
    # 表情
    "😀": "grinning face",
    "😃": "grinning face with big eyes",
    "😄": "grinning face with smiling eyes",
    "😁": "beaming face with smiling eyes",
    "😆": "grinning squinting face",
    "😅": "grinning face with sweat",
    "🤣": "rolling on the floor laughing",
    "😂": "face with tears of joy",
    "🙂": "slightly smiling face",
    "🙃": "upside down face",
    "😉": "winking face",
    "😊": "smiling face with smiling eyes",
    "😇": "smiling face with halo",
    "🥰": "smiling face with hearts",
    "😍": "smiling face with heart eyes",
    "🤩": "star struck",
    "😘": "face blowing a kiss",
    "😋": "face savoring food",
    "😜": "winking face with tongue",
    "🤗": "hugging face",
    "🤔": "thinking face",
    "🤨": "face with raised eyebrow",
    "😐": "neutral face",
    "😏": "smirking face",
    "🙄": "face with rolling eyes",
    "😬": "grimacing face",
    "😌": "relieved face",
    "😔": "pensive face",
    "😴": "sleeping face",
    "🤯": "exploding head",
    "🥳": "partying face",
    "😎": "smiling face with sunglasses",
    "🤓": "nerd face",
    "🧐": "face with monocle",
    "😕": "confused face",
    "😟": "worried face",
    "😮": "face with open mouth",
    "😲": "astonished face",
    "😳": "flushed face",
    "🥺": "pleading face",
    "😢": "crying face",
    "😭": "loudly crying face",
    "😱": "face screaming in fear",
    "😞": "disappointed face",
    "😩": "weary face",
    "😤": "face with steam from nose",
    "😡": "pouting face",
    "🤖": "robot",
    # 手势
    "👍": "thumbs up",
    "👎": "thumbs down",
    "👌": "OK hand",
    "✌️": "victory hand",
    "🤞": "crossed fingers",
    "👈": "backhand index pointing left",
    "👉": "backhand index pointing right",
    "👆": "backhand index pointing up",
    "👇": "backhand index pointing down",
    "☝️": "index pointing up",
    "✋": "raised hand",
    "👋": "waving hand",
    "🤝": "handshake",
    "🙏": "folded hands",
    "✍️": "writing hand",
    "💪": "flexed biceps",
    "👏": "clapping hands",
    "🙌": "raising hands",
    # 心形
    "❤️": "red heart",
    "💛": "yellow heart",
    "💚": "green heart",
    "💙": "blue heart",
    "💜": "purple heart",
    "💔": "broken heart",
    "💖": "sparkling heart",
    # 常用物品
    "⭐": "star",
    "✨": "sparkles",
    "🔥": "fire",
    "🌈": "rainbow",
    "🎁": "wrapped gift",
    "🎉": "party popper",
    "🎊": "confetti ball",
    "🏆": "trophy",
    "🥇": "gold medal",
    "🎯": "direct hit",
    "🎤": "microphone",
    "🎧": "headphone",
    "🎵": "musical note",
    "📱": "mobile phone",
    "💻": "laptop",
    "📚": "books",
    "📖": "open book",
    "📝": "memo",
    "✅": "check mark",
    "❌": "cross mark",
    "⚠️": "warning",
    "🚫": "prohibited",
    "💯": "hundred points",
    "💬": "speech balloon",
    "💭": "thought balloon",
    "🔍": "magnifying glass",
    "🔑": "key",
    "💡": "light bulb",
    "🎓": "graduation cap",
    "🌍": "globe showing Europe-Africa",
    "🌎": "globe showing Americas",
    "🌏": "globe showing Asia-Australia",
    "🏠": "house",
    "🏫": "school",
    # 食物
    "🍕": "pizza",
    "🍔": "hamburger",
    "🍎": "red apple",
    "🍣": "sushi",
    "🍜": "steaming bowl",
    "🍰": "shortcake",
    "☕": "hot beverage",
    "🍵": "teacup without handle",
}

# 语言到 BCP-47 语音代码
LANGUAGE_VOICE_CODES: Dict[str, List[str]] = {
    "english": ["en-US", "en-GB", "en-AU", "en-IN", "en-CA"],
    "hindi": ["hi-IN"],
    "spanish": ["es-ES", "es-MX", "es-AR", "es-US"],
    "french": ["fr-FR", "fr-CA", "fr-BE"],
    "german": ["de-DE", "de-AT", "de-CH"],
    "chinese": ["zh-CN", "zh-TW", "zh-HK"],
    "japanese": ["ja-JP"],
    "korean": ["ko-KR"],
    "arabic": ["ar-SA", "ar-EG", "ar-AE"],
    "portuguese": ["pt-BR", "pt-PT"],
    "russian": ["ru-RU"],
    "italian": ["it-IT"],
    "dutch": ["nl-NL", "nl-BE"],
    "turkish": ["tr-TR"],
    "polish": ["pl-PL"],
    "vietnamese": ["vi-VN"],
    "thai": ["th-TH"],
    "indonesian": ["id-ID"],
    "bengali": ["bn-IN", "bn-BD"],
    "urdu": ["ur-PK", "ur-IN"],
}

_NUMBER_WORDS = {
    "0": "zero",
    "1": "one",
    "2": "two",
    "3": "three",
    "4": "four",
    "5": "five",
    "6": "six",
    "7": "seven",
    "8": "eight",
    "9": "nine",
}

# (pattern, replacement)，按顺序执行
_MARKDOWN_RULES = [
    (re.compile(r"```[\s\S]*?```"), " code block "),
    (re.compile(r"`([^`]+)`"), r"\1"),
    (re.compile(r"(\*\*|__)(.*?)\1"), r"\2"),
    (re.compile(r"(\*|_)(.*?)\1"), r"\2"),
    (re.compile(r"~~(.*?)~~"), r"\1"),
    (re.compile(r"^#{1,6}\s+", re.MULTILINE), ""),
    (re.compile(r"^>\s+", re.MULTILINE), ""),
    (re.compile(r"^(-{3,}|_{3,}|\*{3,})$", re.MULTILINE), " separator "),
    # 图片要先于链接处理，否则 `![alt](url)` 会被当作链接
    (re.compile(r"!\[([^\]]*)\]\([^)]+\)"), r"image: \1"),
    (re.compile(r"\[([^\]]+)\]\([^)]+\)"), r"\1"),
    (re.compile(r"<[^>]+>"), ""),
    # 学习标记不朗读
    (re.compile(r"\[VOCAB_WORD:[^\]]+\]"), ""),
    (re.compile(r"\[PHRASE:[^\]]+\]"), ""),
    (re.compile(r"\[GRAMMAR:[^\]]+\]"), ""),
    (re.compile(r"\[EXAMPLE:[^\]]+\]"), ""),
    (re.compile(r"\[TRANSLATION:[^\]]+\]"), ""),
]

_REDUNDANT_SYMBOL_RULES = [
    (re.compile(r"\*{2,}"), ""),
    (re.compile(r"\*+"), " "),
    (re.compile(r"-{3,}"), " "),
    (re.compile(r"_{2,}"), ""),
    (re.compile(r"={2,}"), " "),
    (re.compile(r"\+{2,}"), ""),
    (re.compile(r"#{2,}"), ""),
    (re.compile(r"\|{2,}"), ""),
    (re.compile(r"\.{4,}"), "... "),
    (re.compile(r"!{3,}"), "!! "),
    (re.compile(r"\?{3,}"), "?? "),
    # 只含符号的括号
    (re.compile(r"[(\[{][*\-_=+#|.!?\s]+[\])}]"), ""),
    (re.compile(r"https?://[^\s]+"), ""),
    (re.compile(r"www\.[^\s]+"), ""),
    (re.compile(r"[\w.-]+@[\w.-]+\.\w+"), "email address"),
]

_SPECIAL_CHARACTER_RULES = [
    (re.compile(r"&"), " and "),
    (re.compile(r"@"), " at "),
    (re.compile(r"#(?!\d)"), " hash "),
    (re.compile(r"\$"), " dollar "),
    (re.compile(r"%"), " percent "),
    (re.compile(r"\^"), " "),
    (re.compile(r"~"), " "),
    (re.compile(r"`"), ""),
    (re.compile(r"\(([^)]+)\)"), r", \1,"),
]

_PAUSE_RULES = [
    (re.compile(r"([.!?])\s+"), r"\1 "),
    (re.compile(r",\s+"), ", "),
    (re.compile(r":\s+"), ": "),
    (re.compile(r";\s+"), "; "),
]


def _apply_rules(text: str, rules) -> str:
    for pattern, replacement in rules:
        text = pattern.sub(replacement, text)
    return text


def emoji_to_text(text: str) -> str:
    """将表情替换为朗读文本（两侧补空格）"""
    for emoji, spoken in EMOJI_MAP.items():
        if emoji in text:
            text = text.replace(emoji, f" {spoken} ")
    return text


def clean_markdown_for_speech(text: str) -> str:
    """去掉 markdown、HTML 与学习标记；代码块和分隔线替换为可朗读的占位词"""
    return _apply_rules(text, _MARKDOWN_RULES)


def clean_redundant_symbols(text: str) -> str:
    return _apply_rules(text, _REDUNDANT_SYMBOL_RULES)


def clean_special_characters(text: str) -> str:
    """将 & @ # $ % 等符号替换为单词，括号内容改为逗号停顿"""
    return _apply_rules(text, _SPECIAL_CHARACTER_RULES)


def numbers_to_words(text: str) -> str:
    """单个数字转英文单词"""
    return re.sub(r"\b([0-9])\b", lambda m: _NUMBER_WORDS[m.group(1)], text)


def add_speech_pauses(text: str) -> str:
    return _apply_rules(text, _PAUSE_RULES)


def normalize_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def clean_text_for_speech(text: str, language: str = "english", convert_numbers: bool = False) -> str:
    """
    TTS 文本清理总入口

    Args:
        text: 原始消息
        language: 朗读语言（目前所有语言使用同一套规则）
        convert_numbers: 是否将单个数字转为单词

    Returns:
        str: 清理后的单行文本
    """
    cleaned = emoji_to_text(text)
    cleaned = clean_markdown_for_speech(cleaned)
    cleaned = clean_redundant_symbols(cleaned)
    cleaned = clean_special_characters(cleaned)
    if convert_numbers:
        cleaned = numbers_to_words(cleaned)
    cleaned = add_speech_pauses(cleaned)
    return normalize_whitespace(cleaned)


def get_voice_codes_for_language(language: str) -> List[str]:
    """获取语言对应的语音代码，未知语言回退到英语"""
    return LANGUAGE_VOICE_CODES.get(language.lower(), LANGUAGE_VOICE_CODES["english"])


@dataclass(frozen=True)
class SpeechValidation:
    """朗读前校验结果"""

    valid: bool
    cleaned: str
    error: Optional[str] = None


class SpeechTextCleaner:
    """TTS 文本清理器

    从配置的 speech 段读取最大长度、默认语言与数字转换开关。
    """

    def __init__(self, config_manager=None) -> None:
        config_manager = config_manager or get_config_manager()
        speech_config = config_manager.get_speech_config()
        self.max_length = int(speech_config.get("max_length", 5000))
        self.default_language = str(speech_config.get("default_language", "english"))
        self.convert_numbers = bool(speech_config.get("convert_numbers", False))

    def clean(self, text: str, language: Optional[str] = None) -> str:
        return clean_text_for_speech(
            text,
            language or self.default_language,
            convert_numbers=self.convert_numbers,
        )

    def voice_codes(self, language: Optional[str] = None) -> List[str]:
        return get_voice_codes_for_language(language or self.default_language)

    def validate(self, text, language: Optional[str] = None) -> SpeechValidation:
        """
        校验并清理待朗读文本

        用处：朗读前统一检查，空文本直接拒绝，过长文本截断并给出提示。

        Args:
            text: 待朗读文本
            language: 朗读语言，默认使用配置中的语言

        Returns:
            SpeechValidation: 校验结果
        """
        if not text or not isinstance(text, str):
            return SpeechValidation(valid=False, cleaned="", error="Invalid text input")

        cleaned = self.clean(text, language)
        if not cleaned:
            return SpeechValidation(valid=False, cleaned="", error="Text is empty after cleaning")

        if len(cleaned) > self.max_length:
            logger.warning(f"朗读文本过长，截断至 {self.max_length} 字符（原长度 {len(cleaned)}）")
            return SpeechValidation(
                valid=True,
                cleaned=cleaned[: self.max_length] + "...",
                error=f"Text truncated to {self.max_length} characters",
            )

        return SpeechValidation(valid=True, cleaned=cleaned)


def validate_text_for_speech(text, language: Optional[str] = None) -> SpeechValidation:
    """使用默认配置校验待朗读文本"""
    return SpeechTextCleaner().validate(text, language)


__all__ = [
    "EMOJI_MAP",
    "LANGUAGE_VOICE_CODES",
    "emoji_to_text",
    "clean_markdown_for_speech",
    "clean_redundant_symbols",
    "clean_special_characters",
    "numbers_to_words",
    "add_speech_pauses",
    "normalize_whitespace",
    "clean_text_for_speech",
    "get_voice_codes_for_language",
    "SpeechValidation",
    "SpeechTextCleaner",
    "validate_text_for_speech",
]
