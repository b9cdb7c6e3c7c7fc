from pathlib import Path

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def read_example(name: str) -> str:
    with open(EXAMPLES / name, 'r', encoding='utf-8') as f:
        return f.read()
