import io

import pytest

from practica.telephones import (
    MobilePhone,
    Radiotelephone,
    main,
    read_mobile_phones,
    read_radiotelephones,
    write_report,
)


def test_mobile_describe():
    phone = MobilePhone("Nova", "Acme", 199.5, "black", 64)
    assert phone.describe() == "Nova (Acme): black mobile phone with 64GB memory, priced at $199.5"


def test_radio_describe_with_machine():
    radio = Radiotelephone("Wave", "Beta", 50.0, 3.0, True)
    assert radio.describe() == "Wave (Beta): 3 mile range radiotelephone with answering machine, priced at $50"


def test_radio_describe_without_machine():
    radio = Radiotelephone("Wave", "Beta", 50.0, 3.0, False)
    assert radio.describe() == "Wave (Beta): 3 mile range radiotelephone, priced at $50"


def test_read_radiotelephones():
    stream = io.StringIO("Wave Beta 50 3 1\nTide Gamma 20.5 1.5 0\n")
    assert read_radiotelephones(stream) == [
        Radiotelephone("Wave", "Beta", 50.0, 3.0, True),
        Radiotelephone("Tide", "Gamma", 20.5, 1.5, False),
    ]


def test_read_radiotelephones_stops_at_bad_flag():
    stream = io.StringIO("Wave Beta 50 3 1\nTide Gamma 20.5 1.5 2\nLast One 1 1 0\n")
    assert [r.name for r in read_radiotelephones(stream)] == ["Wave"]


def test_read_mobile_phones():
    stream = io.StringIO("Nova Acme 199.5 black 64\nBad Acme cheap red 8\n")
    assert read_mobile_phones(stream) == [MobilePhone("Nova", "Acme", 199.5, "black", 64)]


def test_read_ignores_incomplete_record():
    assert read_mobile_phones(io.StringIO("Nova Acme 199.5 black")) == []


def test_write_report():
    radios = [
        Radiotelephone("Wave", "Beta", 50.0, 3.0, True),
        Radiotelephone("Tide", "Gamma", 20.0, 1.0, False),
    ]
    mobiles = [MobilePhone("Nova", "Acme", 30.0, "black", 64)]
    out = io.StringIO()
    phones = write_report(radios, mobiles, out)
    assert [p.name for p in phones] == ["Tide", "Nova", "Wave"]
    prices = [p.price for p in phones]
    assert prices == sorted(prices)
    text = out.getvalue()
    lines = text.splitlines()
    assert lines[:3] == ["Tide (Gamma): $20", "Nova (Acme): $30", "Wave (Beta): $50"]
    assert "Total amount of all phones: $100" in lines
    section = text.split("Radiotelephones with answering machines:\n")[1]
    assert "Name: Wave" in section
    assert "Name: Tide" not in section
    assert "Answering Machine: Yes" in section


def test_main(tmp_path, capsys):
    radios = tmp_path / "radios.txt"
    mobiles = tmp_path / "mobiles.txt"
    output = tmp_path / "report.txt"
    radios.write_text("Wave Beta 50 3 1\n", encoding="utf-8")
    mobiles.write_text("Nova Acme 30 black 64\n", encoding="utf-8")
    assert main([str(radios), str(mobiles), str(output)]) == 0
    printed = capsys.readouterr().out.splitlines()
    assert printed == [
        MobilePhone("Nova", "Acme", 30.0, "black", 64).describe(),
        Radiotelephone("Wave", "Beta", 50.0, 3.0, True).describe(),
    ]
    assert output.read_text(encoding="utf-8").startswith("Nova (Acme): $30\nWave (Beta): $50\n")


@pytest.mark.parametrize("missing", ["radios", "mobiles"])
def test_main_missing_input(tmp_path, missing):
    radios = tmp_path / "radios.txt"
    mobiles = tmp_path / "mobiles.txt"
    output = tmp_path / "report.txt"
    if missing != "radios":
        radios.write_text("Wave Beta 50 3 1\n", encoding="utf-8")
    if missing != "mobiles":
        mobiles.write_text("Nova Acme 30 black 64\n", encoding="utf-8")
    assert main([str(radios), str(mobiles), str(output)]) == 0
    lines = output.read_text(encoding="utf-8").splitlines()
    assert len([line for line in lines if line.endswith(("$30", "$50")) and "(" in line]) == 1