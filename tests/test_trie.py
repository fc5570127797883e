from metricsdb.trie import Trie


def test_trie_basics():
    trie = Trie()

    trie.insert("test")
    assert trie.contains("test") is True
    trie.insert("tester")
    assert trie.contains("test") is True
    assert trie.contains("tester") is True


def test_prefix_is_not_a_word():
    trie = Trie()
    trie.insert("tester")
    assert trie.contains("test") is False
    assert trie.contains("testers") is False


def test_missing_and_empty():
    trie = Trie()
    assert trie.contains("anything") is False
    assert trie.contains("") is False
    trie.insert("")
    assert trie.contains("") is True


def test_in_operator():
    trie = Trie()
    trie.insert("metric")
    assert "metric" in trie
    assert "metrics" not in trie