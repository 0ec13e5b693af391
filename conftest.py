# makes the top-level packages importable when running the tests from the repository root
