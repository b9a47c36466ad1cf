from verse_matcher.search.corpus_search import CorpusSearchService, flatten_corpus
