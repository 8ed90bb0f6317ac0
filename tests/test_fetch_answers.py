from script.fetch_answers import parse_answers, prune_guesses
from wordlesolver.datasets import unique_preserve_order

HTML = """
<html><body>
<ul>
  <li>2024-01-02 (Tue) 928 CRANE</li>
  <li>2024-01-01 (Mon) 927 ROUTE</li>
  <li>2023-12-31 (Sun) 926 CRANE</li>
  <li>Not an answer row: HELLO</li>
</ul>
</body></html>
"""


def test_parse_answers():
    assert parse_answers(HTML) == ["crane", "route"]


def test_unique_preserve_order():
    assert unique_preserve_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_prune_guesses():
    assert prune_guesses(["soare", "crane", "roate"], ["crane"]) == ["soare", "roate"]
