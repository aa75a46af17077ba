"""
Shared test fixtures and configuration.
"""

import pytest

# Two entries out of key order, separated the way most .bib files are
SAMPLE_BIBTEX = """@article{zhang2021,
  title = {Deep Learning Advances},
  author = {Zhang, C. and Dee, D.},
  journal = {Neural Networks},
  year = {2021}
}

@inproceedings{Abbott2020,
  title = {Machine Learning for Beginners},
  author = {Abbott, A. and Bell, B.},
  booktitle = {Proceedings of the Test Conference},
  year = {2020}
}
"""

SORTED_BIBTEX = """@inproceedings{Abbott2020,
  title = {Machine Learning for Beginners},
  author = {Abbott, A. and Bell, B.},
  booktitle = {Proceedings of the Test Conference},
  year = {2020}
}

@article{zhang2021,
  title = {Deep Learning Advances},
  author = {Zhang, C. and Dee, D.},
  journal = {Neural Networks},
  year = {2021}
}"""


@pytest.fixture
def sample_bibtex():
    """Unsorted BibTeX text with two entries."""
    return SAMPLE_BIBTEX


@pytest.fixture
def sorted_bibtex():
    """The sample entries in key order, as the sorter renders them."""
    return SORTED_BIBTEX


@pytest.fixture
def mock_bibtex_file(tmp_path, sample_bibtex):
    """Create a temporary BibTeX file for testing."""
    file_path = tmp_path / "test.bib"
    file_path.write_text(sample_bibtex, encoding="utf-8")
    return str(file_path)


@pytest.fixture
def sorted_bibtex_file(tmp_path, sorted_bibtex):
    """Create a temporary BibTeX file that is already sorted."""
    file_path = tmp_path / "sorted.bib"
    file_path.write_text(sorted_bibtex + "\n", encoding="utf-8")
    return str(file_path)
