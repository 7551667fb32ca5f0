"""Report writers for result trees: NUnit-style XML, JUnit XML and HTML."""
