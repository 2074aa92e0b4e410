"""Upload bookkeeping used by the Streamlit console."""
from types import SimpleNamespace

from tracker.ui.dashboard import _import_key


def test_import_key_tells_re_uploads_of_the_same_file_apart():
    first = SimpleNamespace(file_id="a1", name="carrier.xlsx", size=2048)
    again = SimpleNamespace(file_id="b2", name="carrier.xlsx", size=2048)

    assert _import_key(first, 7) != _import_key(again, 7)
    assert _import_key(first, 7) != _import_key(first, None)


def test_import_key_falls_back_to_file_name():
    uploaded = SimpleNamespace(name="carrier.xlsx")

    assert _import_key(uploaded, None) == ("carrier.xlsx", None)
