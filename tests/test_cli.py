import pytest

from vehicle_rental.cli import main


def _split_halves(text):
    marker = "Rent ID: 2"
    index = text.index(marker)
    return text[:index], text[index:]


def test_main_returns_zero(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Client:\n First name: Jan" in out


def test_new_rent_only_in_second_report(capsys):
    main([])
    out = capsys.readouterr().out
    first_half, second_half = _split_halves(out)
    assert "Rent ID: 2" not in first_half
    assert out.count("Rent ID: 2") >= 2


def test_reports_printed_twice(capsys):
    main([])
    out = capsys.readouterr().out
    assert out.count("No current rentals.") == 0
    assert out.count("Vehicle:\n plate number: TEST 001") == 4
    assert out.count("Current rentals:") == 4


def test_help_exits(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "usage" in capsys.readouterr().out


def test_unknown_argument_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2