"""Run the Python code blocks of the usage guide as tests."""

from sybil import Sybil
from sybil.parsers.markdown import PythonCodeBlockParser

# Every ```python block in examples.md runs in one shared namespace
pytest_collect_file = Sybil(
    parsers=[PythonCodeBlockParser()],
    patterns=["examples.md"],
).pytest()
