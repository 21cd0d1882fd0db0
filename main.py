from markov_model import MarkovModel, GenerationError
from text_processor import TextProcessor
from config import load_config
import argparse
import json
import sys
import logging

logger = logging.getLogger(__name__)

DESCRIPTION = """\
Генератор случайных предложений по тексту книги.
Слова текста связываются в граф "слово -> следующее слово" с частотами,
предложение строится случайным блужданием от слова с заглавной буквы
до слова с точкой, восклицательным или вопросительным знаком."""


def build_parser():
    parser = argparse.ArgumentParser(prog='markov-sentences', description=DESCRIPTION,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('-f', '--file', help='путь к текстовому файлу (по умолчанию books/default.txt)')
    parser.add_argument('-s', '--stats', action='store_true', help='вывести статистику по словам')
    parser.add_argument('-g', '--graph', action='store_true', help='вывести граф слов в формате JSON')
    parser.add_argument('-n', '--count', type=int, help='количество предложений (по умолчанию 1)')
    parser.add_argument('--max-steps', type=int, dest='max_steps',
                        help='ограничение на длину блуждания (по умолчанию без ограничения)')
    parser.add_argument('--seed', type=int, help='зерно генератора случайных чисел')
    parser.add_argument('--mode', choices=MarkovModel.MODES,
                        help="'graph' - блуждание по графу, 'classes' - выбор по классам слов")
    parser.add_argument('-v', '--verbose', action='store_true', help='подробный лог')
    return parser


def print_stats(words):
    stats = TextProcessor.count_word_stats(words)
    print("Статистика:")
    print(f"{stats.capitalized} слов с заглавной буквы")
    print(f"{stats.with_comma} слов с запятой")
    print(f"{stats.with_ending} слов с точкой, восклицательным или вопросительным знаком")
    print(f"{stats.clean} чистых слов")
    print()
    print(f"{stats.total} слов всего")
    print("-------")


def print_graph(graph):
    print("Граф слов:", json.dumps(graph.model, ensure_ascii=False, indent=2))
    print("Стартовые слова:", list(graph.start_words))
    print("Конечные слова:", list(graph.end_words))


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
    except ValueError as e:
        print(f"Ошибка: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    model = MarkovModel(seed=config.seed)
    try:
        graph = model.train_from_file(config.file_path)

        if config.stats:
            print_stats(model.words)

        if config.graph:
            print_graph(graph)

        for sentence in model.generate_text(count=config.count, max_steps=config.max_steps,
                                            mode=config.mode):
            print(sentence)

    except (GenerationError, OSError) as e:
        logger.debug(f"Генерация прервана: {type(e).__name__}")
        print(f"Ошибка: {e}", file=sys.stderr)
        return 1
    finally:
        model.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
