import pytest

from tabuleiro.game import GameMode
from tabuleiro.history import History


def test_record_pvp_results():
    history = History()
    history.record(GameMode.PVP, 1, 30.0)
    history.record(GameMode.PVP, 2, 10.0)
    history.record(GameMode.PVP, 0, 20.0)
    assert history.pvp_games == 3
    assert history.p1_wins_pvp == 1
    assert history.p2_wins_pvp == 1
    assert history.draws_pvp == 1
    assert history.longest_pvp == 30.0
    assert history.shortest_pvp == 10.0
    assert history.pvc_games == 0


def test_record_pvc_results():
    history = History()
    history.record(GameMode.PVC, 2, 5.0)
    history.record(1, 1, 8.0)
    history.record(GameMode.PVC, 3, 6.0)
    assert history.pvc_games == 3
    assert history.computer_wins_pvc == 1
    assert history.player_wins_pvc == 1
    assert history.draws_pvc == 1
    assert history.longest_pvc == 8.0
    assert history.shortest_pvc == 5.0
    assert history.pvp_games == 0


def test_zero_shortest_is_replaced():
    history = History()
    history.record(GameMode.PVP, 1, 0.0)
    history.record(GameMode.PVP, 1, 4.0)
    assert history.shortest_pvp == 4.0


def test_render_shows_counts():
    history = History()
    history.record(GameMode.PVP, 1, 3.0)
    text = history.render()
    assert text.startswith("=== Histórico ===\n")
    assert "Partidas PvP: 1\n" in text
    assert "Vitórias Jogador 1 (PvP): 1\n" in text
    assert "Empates PvC: 0\n" in text


def test_save_load_round_trip(tmp_path):
    history = History()
    history.record(GameMode.PVP, 1, 12.5)
    history.record(GameMode.PVC, 2, 7.25)
    path = tmp_path / "historico.dat"
    history.save(path)
    assert History.load(path) == history


def test_saved_file_has_fixed_size(tmp_path):
    path = tmp_path / "historico.dat"
    History().save(path)
    assert len(path.read_bytes()) == 64


def test_load_missing_file_gives_empty(tmp_path):
    assert History.load(tmp_path / "absent.dat") == History()


def test_load_wrong_size_raises(tmp_path):
    path = tmp_path / "historico.dat"
    path.write_bytes(b"\x00" * 10)
    with pytest.raises(ValueError):
        History.load(path)