import os
import logging
from dataclasses import dataclass
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_BOOK = os.path.join(BASE_DIR, 'books', 'default.txt')


@dataclass(frozen=True)
class GeneratorConfig:
    file_path: str = DEFAULT_BOOK
    stats: bool = False
    graph: bool = False
    count: int = 1
    max_steps: int = None
    mode: str = 'graph'
    seed: int = None
    log_level: str = 'WARNING'


def _int_or_none(value, name):
    if value in (None, ''):
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Переменная {name} должна быть целым числом, получено: {value!r}")


def resolve_file_path(file_arg=None):
    """Абсолютный путь возвращается как есть, относительный считается от каталога проекта"""
    if not file_arg:
        return DEFAULT_BOOK
    if os.path.isabs(file_arg):
        return file_arg
    return os.path.join(BASE_DIR, file_arg)


def load_config(args=None):
    """
    Сборка конфигурации: значения из командной строки важнее переменных окружения (.env)

    Args:
        args: argparse.Namespace или None

    Returns:
        GeneratorConfig
    """
    load_dotenv()

    env = {
        'file_path': os.getenv('MARKOV_BOOK', ''),
        'max_steps': _int_or_none(os.getenv('MARKOV_MAX_STEPS'), 'MARKOV_MAX_STEPS'),
        'seed': _int_or_none(os.getenv('MARKOV_SEED'), 'MARKOV_SEED'),
        'log_level': os.getenv('MARKOV_LOG_LEVEL', 'WARNING').upper(),
    }

    def pick(name, default=None):
        value = getattr(args, name, None) if args is not None else None
        return value if value is not None else env.get(name, default)

    max_steps = pick('max_steps')
    if max_steps is not None and max_steps < 1:
        raise ValueError("Максимальное число шагов должно быть положительным")

    count = pick('count', 1)
    if count < 1:
        raise ValueError("Количество предложений должно быть положительным")

    config = GeneratorConfig(
        file_path=resolve_file_path(pick('file') or env['file_path']),
        stats=bool(pick('stats', False)),
        graph=bool(pick('graph', False)),
        count=count,
        max_steps=max_steps,
        mode=pick('mode', 'graph'),
        seed=pick('seed'),
        log_level='INFO' if getattr(args, 'verbose', False) else env['log_level'],
    )
    logger.debug(f"Конфигурация: {config}")
    return config
