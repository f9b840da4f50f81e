from ods_formats import __version__, _get_version


def test_version():
    version = _get_version()
    assert version.count(".") == 2
    assert version == __version__
