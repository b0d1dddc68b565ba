"""End-to-end tests for the rrcal command line."""

import pytest

from rrcal.schedule import main

ROSTER = "1. Спартак — Москва\n2. Зенит — Санкт-Петербург\n\n3. Рубин - Казань\n"


@pytest.fixture
def roster(tmp_path):
    path = tmp_path / "teams.txt"
    path.write_text(ROSTER, encoding="utf-8")
    return path


class TestMain:
    def test_writes_calendar(self, roster, tmp_path, capsys):
        out = tmp_path / "calendar.txt"
        assert main([str(roster), "07.08.2026", "14.08.2026", str(out)]) == 0

        text = out.read_text(encoding="utf-8")
        assert "Пятница, 7 августа 2026" in text
        assert "Суббота, 8 августа 2026" in text
        assert "Всего игр: 6" in text
        assert text.count(" | ") == 6

        printed = capsys.readouterr().out
        assert "Loaded 3 teams" in printed
        assert "Matches to schedule: 6" in printed
        assert "Available slots: 12" in printed
        assert "CALENDAR CHECK" in printed
        assert "OK: every match placed once" in printed

    def test_two_teams(self, tmp_path):
        roster = tmp_path / "teams.txt"
        roster.write_text("1. A — X\n2. B — Y\n", encoding="utf-8")
        out = tmp_path / "calendar.txt"
        assert main([str(roster), "01.08.2026", "08.08.2026", str(out)]) == 0
        text = out.read_text(encoding="utf-8")
        assert "A (X)" in text and "B (Y)" in text
        assert "Всего игр: 2" in text

    def test_csv_and_locale(self, roster, tmp_path):
        out = tmp_path / "calendar.txt"
        csv_out = tmp_path / "calendar.csv"
        code = main([str(roster), "07.08.2026", "14.08.2026", str(out),
                     "--csv", str(csv_out), "--locale", "en"])
        assert code == 0
        assert "Total games: 6" in out.read_text(encoding="utf-8")
        assert len(csv_out.read_text(encoding="utf-8").splitlines()) == 7

    def test_config_file(self, roster, tmp_path):
        config = tmp_path / "league.yaml"
        config.write_text("pattern:\n  days: [Wed]\n  times: ['19:00']\n")
        out = tmp_path / "calendar.txt"
        # Wednesdays 5 Aug .. 9 Sep: 6 slots for 6 matches
        code = main([str(roster), "03.08.2026", "09.09.2026", str(out),
                     "-c", str(config)])
        assert code == 0
        assert "Среда, 9 сентября 2026" in out.read_text(encoding="utf-8")

    def test_invalid_date(self, roster, tmp_path, capsys):
        out = tmp_path / "calendar.txt"
        assert main([str(roster), "2026-08-07", "14.08.2026", str(out)]) == 1
        assert "Error: Invalid date format" in capsys.readouterr().out
        assert not out.exists()

    def test_missing_roster(self, tmp_path, capsys):
        out = tmp_path / "calendar.txt"
        code = main([str(tmp_path / "nope.txt"), "07.08.2026", "14.08.2026",
                     str(out)])
        assert code == 1
        assert "Error: Teams file does not exist" in capsys.readouterr().out

    @pytest.mark.parametrize("start,end", [
        ("14.08.2026", "07.08.2026"),
        ("07.08.2026", "07.08.2026"),
        ("07.08.2026", "10.08.2026"),
    ])
    def test_invalid_range_before_roster(self, tmp_path, capsys, start, end):
        roster = tmp_path / "teams.txt"
        roster.write_text("1. TeamOnly\n", encoding="utf-8")
        out = tmp_path / "calendar.txt"
        assert main([str(roster), start, end, str(out)]) == 1
        printed = capsys.readouterr().out
        assert "Error:" in printed
        assert "Loading teams" not in printed
        assert not out.exists()

    def test_malformed_roster_line(self, tmp_path, capsys):
        roster = tmp_path / "teams.txt"
        roster.write_text("1. A — X\n1. TeamOnly\n", encoding="utf-8")
        out = tmp_path / "calendar.txt"
        assert main([str(roster), "07.08.2026", "14.08.2026", str(out)]) == 1
        assert "1. TeamOnly" in capsys.readouterr().out
        assert not out.exists()

    def test_not_enough_teams(self, tmp_path, capsys):
        roster = tmp_path / "teams.txt"
        roster.write_text("1. A — X\n", encoding="utf-8")
        out = tmp_path / "calendar.txt"
        assert main([str(roster), "07.08.2026", "14.08.2026", str(out)]) == 1
        assert "Not enough teams" in capsys.readouterr().out

    def test_not_enough_slots(self, tmp_path, capsys):
        roster = tmp_path / "teams.txt"
        roster.write_text(
            "".join(f"{i}. Team{i} — City{i}\n" for i in range(1, 6)),
            encoding="utf-8",
        )
        out = tmp_path / "calendar.txt"
        assert main([str(roster), "07.08.2026", "14.08.2026", str(out)]) == 1
        assert "12 slots for 20 matches" in capsys.readouterr().out
        assert not out.exists()

    def test_bad_locale(self, roster, tmp_path, capsys):
        out = tmp_path / "calendar.txt"
        code = main([str(roster), "07.08.2026", "14.08.2026", str(out),
                     "--locale", "fr"])
        assert code == 1
        assert "Unknown report locale" in capsys.readouterr().out

    @pytest.mark.parametrize("argv", [
        [],
        ["teams.txt", "07.08.2026", "14.08.2026"],
        ["teams.txt", "07.08.2026", "14.08.2026", "out.txt", "extra"],
    ])
    def test_wrong_argument_count(self, argv, capsys):
        with pytest.raises(SystemExit) as exc:
            main(argv)
        assert exc.value.code == 1
        err = capsys.readouterr().err
        assert "usage: rrcal" in err
        assert "Example:" in err

    def test_roster_not_utf8(self, tmp_path, capsys):
        roster = tmp_path / "teams.txt"
        roster.write_bytes(b"1. A \xe2\x80\x94 X\n2. B\xff \xe2\x80\x94 Y\n")
        out = tmp_path / "calendar.txt"
        assert main([str(roster), "07.08.2026", "14.08.2026", str(out)]) == 1
        assert "is not valid UTF-8" in capsys.readouterr().out
        assert not out.exists()

    def test_output_is_directory(self, roster, tmp_path, capsys):
        out = tmp_path / "out"
        out.mkdir()
        assert main([str(roster), "07.08.2026", "14.08.2026", str(out)]) == 1
        assert "Error: Cannot write" in capsys.readouterr().out

    def test_failed_csv_leaves_no_calendar(self, roster, tmp_path, capsys):
        out = tmp_path / "calendar.txt"
        csv_out = tmp_path / "calendar.csv"
        csv_out.mkdir()
        code = main([str(roster), "07.08.2026", "14.08.2026", str(out),
                     "--csv", str(csv_out)])
        assert code == 1
        assert "Error: Cannot write" in capsys.readouterr().out
        assert not out.exists()

    def test_empty_config_key(self, roster, tmp_path, capsys):
        config = tmp_path / "league.yaml"
        config.write_text("pattern:\n  days:\n")
        out = tmp_path / "calendar.txt"
        code = main([str(roster), "07.08.2026", "14.08.2026", str(out),
                     "-c", str(config)])
        assert code == 1
        assert "Error: pattern.days must be a list" in capsys.readouterr().out
