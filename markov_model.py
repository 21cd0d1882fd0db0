from text_processor import TextProcessor
from dataclasses import dataclass, field
from collections import defaultdict
import random
import time
import logging

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Базовая ошибка генерации; phase - этап, на котором она возникла"""

    phase = None

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"[{self.phase}] {self.message}"


class NoStartWordError(GenerationError):
    phase = 'start'

    def __init__(self, message="Нет слов с заглавной буквы, не с чего начать предложение"):
        super().__init__(message)


class EmptyTokenSequenceError(NoStartWordError):
    def __init__(self, message="В тексте не найдено ни одного слова"):
        super().__init__(message)


class NoEndWordError(GenerationError):
    phase = 'end'

    def __init__(self, message="Нет слов со знаком конца предложения (. ! ?), нечем закончить предложение"):
        super().__init__(message)


@dataclass(frozen=True)
class WordGraph:
    # слово -> {следующее слово: сколько раз встретилось}
    model: dict = field(default_factory=dict)
    start_words: tuple = ()
    end_words: tuple = ()
    # None - граф собран не из последовательности слов
    total_words: int = None

    def __post_init__(self):
        object.__setattr__(self, '_end_set', frozenset(self.end_words))

    def is_end_word(self, word):
        return word in self._end_set

    def successors(self, word):
        return self.model.get(word)


def build_model(words):
    """
    Построение графа смежности слов за один проход

    Args:
        words: последовательность слов после tokenize()

    Returns:
        WordGraph: частоты переходов, стартовые и конечные слова (с повторами)
    """
    transitions = defaultdict(lambda: defaultdict(int))
    start_words = []
    end_words = []

    for i, word in enumerate(words):
        if i < len(words) - 1:
            transitions[word][words[i + 1]] += 1

        if TextProcessor.is_capitalized(word):
            start_words.append(word)
        if TextProcessor.is_terminal(word):
            end_words.append(word)

    model = {word: dict(following) for word, following in transitions.items()}
    return WordGraph(model=model, start_words=tuple(start_words),
                     end_words=tuple(end_words), total_words=len(words))


def weighted_choice(successors, rng=None):
    """Выбор следующего слова с вероятностью, пропорциональной частоте перехода"""
    rng = rng or random
    symbols, weights = zip(*successors.items())
    return rng.choices(symbols, weights=weights, k=1)[0]


def _as_graph(graph, start_words=None, end_words=None):
    if isinstance(graph, WordGraph):
        return graph
    return WordGraph(model=graph or {},
                     start_words=tuple(start_words or ()),
                     end_words=tuple(end_words or ()))


def generate_sentence(graph, start_words=None, end_words=None, max_steps=None, rng=None):
    """
    Генерация одного предложения случайным блужданием по графу

    Args:
        graph: WordGraph или словарь переходов (тогда нужны start_words и end_words)
        max_steps: максимальное число добавленных слов, None - без ограничения
        rng: генератор случайных чисел (random.Random), по умолчанию модуль random

    Returns:
        str: сгенерированное предложение
    """
    graph = _as_graph(graph, start_words, end_words)
    rng = rng or random

    if not graph.start_words:
        if graph.total_words == 0:
            raise EmptyTokenSequenceError()
        raise NoStartWordError()

    word = rng.choice(graph.start_words)
    sentence = [word]
    steps = 0

    while True:
        if max_steps is not None and steps >= max_steps:
            logger.warning(f"Достигнут предел в {max_steps} шагов, блуждание остановлено")
            break

        candidates = graph.successors(word)
        if not candidates:
            break

        word = weighted_choice(candidates, rng)
        sentence.append(word)
        steps += 1

        if TextProcessor.is_terminal(word) or graph.is_end_word(word):
            break

    # Принудительное окончание, если блуждание не дошло до конечного слова
    if not graph.is_end_word(word):
        if not graph.end_words:
            raise NoEndWordError()
        sentence.append(rng.choice(graph.end_words))

    return ' '.join(sentence).strip()


def generate_by_classes(words, length=8, rng=None):
    """
    Упрощенный режим: слова выбираются независимо по классам, без учета переходов.
    Стартовое слово, затем length "средних" слов, затем конечное слово.
    """
    rng = rng or random
    start_words = [w for w in words if TextProcessor.is_capitalized(w)]
    end_words = [w for w in words if TextProcessor.is_terminal(w)]
    middle_words = [w for w in words
                    if not TextProcessor.is_capitalized(w) and not TextProcessor.is_terminal(w)]

    if not words:
        raise EmptyTokenSequenceError()
    if not start_words:
        raise NoStartWordError()
    if not end_words:
        raise NoEndWordError()

    sentence = [rng.choice(start_words)]
    if middle_words:
        sentence.extend(rng.choice(middle_words) for _ in range(length))
    sentence.append(rng.choice(end_words))
    return ' '.join(sentence)


class MarkovModel:
    MODES = ('graph', 'classes')

    def __init__(self, seed=None):
        self.processor = TextProcessor()
        self.rng = random.Random(seed)
        self.words = []
        self.graph = WordGraph()

    def train_from_text(self, text):
        """Разбиение текста на слова и построение графа переходов"""
        logger.info(f"Размер текста: {len(text):,} символов")

        start_time = time.time()
        self.words = self.processor.tokenize(text)
        logger.info(f"Найдено слов: {len(self.words):,}, время: {time.time() - start_time:.2f} сек")

        start_time = time.time()
        self.graph = build_model(self.words)
        logger.info(f"Граф построен: {len(self.graph.model):,} узлов, "
                    f"{len(self.graph.start_words):,} стартовых и "
                    f"{len(self.graph.end_words):,} конечных слов, "
                    f"время: {time.time() - start_time:.2f} сек")
        return self.graph

    def train_from_file(self, file_path):
        text = self.processor.read_text(file_path)
        return self.train_from_text(text)

    def get_probabilities(self, word):
        """
        Вероятности следующего слова для заданного слова

        Returns:
            dict: словарь вероятностей, пустой если у слова нет переходов
        """
        candidates = self.graph.successors(word)
        if not candidates:
            return {}
        total = sum(candidates.values())
        return {w: freq / total for w, freq in candidates.items()}

    def generate_text(self, count=1, max_steps=None, mode='graph', length=8):
        """
        Генерация count предложений

        Args:
            mode: 'graph' - блуждание по графу, 'classes' - независимый выбор по классам слов
            length: число средних слов для режима 'classes'
        """
        if mode not in self.MODES:
            raise ValueError(f"Неизвестный режим генерации: {mode}")

        sentences = []
        for _ in range(count):
            if mode == 'graph':
                sentences.append(generate_sentence(self.graph, max_steps=max_steps, rng=self.rng))
            else:
                sentences.append(generate_by_classes(self.words, length=length, rng=self.rng))
        return sentences

    def close(self):
        """Модель живет только в памяти, освобождать нечего"""
        self.words = []
        self.graph = WordGraph()
