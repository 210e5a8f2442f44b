import pytest

from leaf import ParserOptions


@pytest.fixture
def balanced():
    """Параметры с учётом вложенности фигурных скобок в теле тега."""
    return ParserOptions(balanced_bodies=True)


@pytest.fixture
def write_template(tmp_path):
    """Записывает шаблон в файл и возвращает путь."""
    def _write(name: str, data: bytes):
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _write
