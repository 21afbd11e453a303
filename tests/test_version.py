"""Tests for the llmstack version information."""

from datetime import datetime

from llmstack.version.llmstack_version import Version


def test_version_methods():
    """Test Version class methods."""
    v = Version(
        major=1,
        minor=2,
        patch=3,
        hash="abcdef123456",
        date=datetime(2023, 1, 1),
    )

    assert str(v) == "1.2.3"
    assert v.semver() == (1, 2, 3)
    assert v.hash_short(4) == "abcd"
    assert v.date_string("%Y") == "2023"
    assert "1.2.3" in v.full_version()
    assert "abcd" in v.full_version()


def test_llmstack_version_instance():
    """Test the global LLMSTACK_VERSION instance."""
    import llmstack
    from llmstack.version.llmstack_version import LLMSTACK_VERSION

    assert isinstance(LLMSTACK_VERSION, Version)
    assert llmstack.__version__ == str(LLMSTACK_VERSION)
    assert len(LLMSTACK_VERSION.hash) == 64
