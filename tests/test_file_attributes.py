from easinote_splash.utils.file_attributes import clear_readonly, is_readonly, set_readonly


def test_toggle_readonly(tmp_path):
    f = tmp_path / "SplashScreen.png"
    f.write_bytes(b"png")

    set_readonly(f)
    assert is_readonly(f)

    clear_readonly(f)
    assert not is_readonly(f)
    f.write_bytes(b"new")
    assert f.read_bytes() == b"new"


def test_set_readonly_is_idempotent(tmp_path):
    f = tmp_path / "SplashScreen.png"
    f.write_bytes(b"png")

    set_readonly(f)
    set_readonly(f)
    assert is_readonly(f)

    clear_readonly(f)
    clear_readonly(f)
    assert not is_readonly(f)
