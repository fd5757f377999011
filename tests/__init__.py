"""lookslike test suite.

Test organization:
- unit/test_paths.py: Path building, rendering, parsing and lookup
- unit/test_walker.py: Node classification and leaf traversal
- unit/test_predicates.py: IsDef, optional, is_equal, key_missing
- unit/test_results.py: Results recording, merging and iteration
- unit/test_compiler.py: Schema compilation and evaluation
- unit/test_strict.py: Closed-schema validation
- unit/test_compose.py: Combining validators
- unit/test_errors.py, test_logging.py, test_settings.py, test_documents.py: ambient modules
"""
