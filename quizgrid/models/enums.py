from enum import Enum, IntEnum


class QuestionType(str, Enum):
    MULTICHOICE = "multichoice"
    CATEGORY = "category"      # служебная запись-маркер категории


class TextFormat(IntEnum):
    MOODLE = 0
    HTML = 1
    PLAIN = 2
    MARKDOWN = 4


class AnswerNumbering(str, Enum):
    LETTERS_LOWER = "abc"
    LETTERS_UPPER = "ABCD"
    NUMBERS = "123"
    NONE = "none"
