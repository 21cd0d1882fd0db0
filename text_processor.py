import re
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordStats:
    capitalized: int
    with_comma: int
    with_ending: int
    clean: int
    total: int


class TextProcessor:
    # Допустимые буквы (латиница + кириллица, включая украинские и белорусские)
    UPPER_LETTERS = frozenset('ABCDEFGHIJKLMNOPQRSTUVWXYZАБВГДЕЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯЁЇІЄҐЎ')
    LOWER_LETTERS = "a-zа-яёїієґў'`"
    TERMINAL_MARKS = frozenset('.?!')
    COMMA = ','
    # Для "чистых" слов дефис тоже считается знаком
    NOT_CLEAN_MARKS = frozenset(',?!.-')

    WORD_RE = re.compile(
        rf"[{LOWER_LETTERS}]+[,.!?]|[A-ZА-ЯЁЇІЄҐЎ]?[{LOWER_LETTERS}]+,?"
    )

    @staticmethod
    def tokenize(text):
        """Разбиение текста на слова с сохранением регистра и знаков в конце слова"""
        if not text:
            return []
        return TextProcessor.WORD_RE.findall(text)

    @staticmethod
    def is_capitalized(word):
        return bool(word) and word[0] in TextProcessor.UPPER_LETTERS

    @staticmethod
    def is_terminal(word):
        return bool(word) and word[-1] in TextProcessor.TERMINAL_MARKS

    @staticmethod
    def has_comma(word):
        return bool(word) and word[-1] == TextProcessor.COMMA

    @staticmethod
    def is_clean(word):
        return (bool(word)
                and not TextProcessor.is_capitalized(word)
                and word[-1] not in TextProcessor.NOT_CLEAN_MARKS)

    @staticmethod
    def count_word_stats(words):
        """
        Подсчет статистики по классам слов

        Args:
            words: последовательность слов после tokenize()

        Returns:
            WordStats: количество слов каждого класса и общее количество
        """
        return WordStats(
            capitalized=sum(1 for w in words if TextProcessor.is_capitalized(w)),
            with_comma=sum(1 for w in words if TextProcessor.has_comma(w)),
            with_ending=sum(1 for w in words if TextProcessor.is_terminal(w)),
            clean=sum(1 for w in words if TextProcessor.is_clean(w)),
            total=len(words),
        )

    @staticmethod
    def read_text(file_path):
        """Чтение файла с подбором кодировки: utf-8, затем cp1251, затем latin-1"""
        logger.info(f"Чтение файла {file_path}...")
        for encoding in ('utf-8', 'cp1251'):
            try:
                with open(file_path, 'r', encoding=encoding) as f:
                    return f.read()
            except UnicodeDecodeError:
                logger.warning(f"Файл не читается в кодировке {encoding}, пробуем следующую")
        # latin-1 декодирует любые байты
        with open(file_path, 'r', encoding='latin-1') as f:
            return f.read()


def tokenize(text):
    return TextProcessor.tokenize(text)
