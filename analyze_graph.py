import sys
from collections import Counter
import matplotlib.pyplot as plt
import numpy as np

from config import load_config, resolve_file_path
from markov_model import MarkovModel


def analyze_word_roles(graph, top=10):
    #Самые частые стартовые и конечные слова
    print("СТАРТОВЫЕ И КОНЕЧНЫЕ СЛОВА")

    for title, words in (("Стартовые", graph.start_words), ("Конечные", graph.end_words)):
        results = Counter(words).most_common(top)
        total = len(words)

        print(f"\n{title} (топ-{top} из {total:,}):")
        print("-" * 40)
        print(f"{'Слово':<20} {'Частота':<10} {'Доля':<10}")
        print("-" * 40)
        for word, freq in results:
            share = freq / total if total > 0 else 0
            print(f"{word:<20} {freq:<10,} {share:.4f}")

    return graph.start_words, graph.end_words


def top_transitions(graph, top=10):
    """Самые частые пары соседних слов"""
    pairs = [(word, following, freq)
             for word, successors in graph.model.items()
             for following, freq in successors.items()]
    pairs.sort(key=lambda x: x[2], reverse=True)
    return pairs[:top]


def word_entropy(successors):
    #Энтропия распределения следующих слов (в битах)
    counts = np.array(list(successors.values()), dtype=float)
    if counts.size == 0:
        return 0.0
    p = counts / counts.sum()
    return float(-(p * np.log2(p)).sum())


def mean_entropy(graph):
    #Средняя энтропия, взвешенная по числу переходов из слова
    if not graph.model:
        return 0.0
    entropies = np.array([word_entropy(s) for s in graph.model.values()])
    weights = np.array([sum(s.values()) for s in graph.model.values()], dtype=float)
    return float(np.average(entropies, weights=weights))


def plot_out_degree(graph, path='word_graph_analysis.png'):
    #Гистограмма числа различных следующих слов
    degrees = [len(s) for s in graph.model.values()]

    plt.figure(figsize=(8, 5))
    plt.hist(degrees, bins=max(1, min(50, len(set(degrees)))), color='steelblue')
    plt.xlabel('Число различных следующих слов')
    plt.ylabel('Количество слов')
    plt.title('Распределение исходящих переходов')
    plt.grid(True, alpha=0.3)
    plt.yscale('log')

    plt.tight_layout()
    plt.savefig(path, dpi=150, bbox_inches='tight')
    plt.close()
    print(f"\nГрафик сохранен в '{path}'")
    return degrees


def main(argv=None):
    print("АНАЛИЗ ГРАФА СЛОВ")
    print("=" * 50)

    model = MarkovModel()
    try:
        config = load_config()
        file_path = resolve_file_path(argv[0]) if argv else config.file_path
        graph = model.train_from_file(file_path)

        analyze_word_roles(graph)

        print("\nСАМЫЕ ЧАСТЫЕ ПЕРЕХОДЫ")
        for word, following, freq in top_transitions(graph):
            print(f"  {word} -> {following}: {freq:,}")

        print("\nРАСЧЕТ ЭНТРОПИИ")
        print(f"Средняя энтропия перехода: {mean_entropy(graph):.4f} бит")

        plot_out_degree(graph)

        print("\n" + "=" * 50)
        print("Анализ завершен!")
    except (OSError, ValueError) as e:
        print(f"Ошибка: {e}", file=sys.stderr)
        return 1
    finally:
        model.close()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
