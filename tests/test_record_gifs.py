import record_gifs
from shadergrid.effects import get_effect


def test_render_frames_size():
    frames = record_gifs.render_frames(get_effect("u"), fps=4, duration=1.0, width=8, height=5, scale=3)
    assert len(frames) == 4
    assert frames[0].size == (24, 15)
    assert frames[0].mode == "RGB"


def test_record_writes_gif(tmp_path, monkeypatch):
    monkeypatch.setattr(record_gifs, "MEDIA_DIR", tmp_path)
    path = record_gifs.record(get_effect("o"), fps=5, duration=0.4)
    assert path == tmp_path / "effect-o-checkered-rainbow-fast.gif"
    assert path.exists()
