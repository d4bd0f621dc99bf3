from wikisearch.index.inverted_index import InvertedIndex


def test_postings_match_documents_exactly(make_corpus) -> None:
    corpus = make_corpus(
        {
            "a": ["red", "green", "red"],
            "b": ["green", "blue"],
            "c": ["blue", "blue", "red"],
        }
    )
    index = corpus.inverted_index

    for token in corpus.dictionary.tokens():
        token_id = corpus.dictionary.get(token)
        expected = tuple(doc.index for doc in corpus.documents if token_id in doc.token_ids)
        assert index.postings(token_id) == expected

    assert len(index) == len(corpus.dictionary)


def test_repeated_tokens_store_document_once(make_corpus) -> None:
    corpus = make_corpus({"a": ["x", "x", "x"], "b": ["x"]})

    assert corpus.inverted_index.postings(0) == (0, 1)


def test_unknown_token_has_no_postings() -> None:
    index = InvertedIndex.build([])

    assert index.postings(42) == ()
    assert 42 not in index
    assert index.candidates([1, 2]) == set()


def test_candidates_is_union_of_postings(make_corpus) -> None:
    corpus = make_corpus({"a": ["x"], "b": ["y"], "c": ["z", "x"]})
    x, y = corpus.dictionary.get("x"), corpus.dictionary.get("y")

    assert corpus.inverted_index.candidates([x, y]) == {0, 1, 2}
    assert corpus.inverted_index.candidates([y]) == {1}
