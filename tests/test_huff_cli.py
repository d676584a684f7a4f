from huff_cli import main


def test_cli_round_trip(tmp_path, capsys):
    original = tmp_path / "notes.txt"
    compressed = tmp_path / "notes.hf"
    restored = tmp_path / "notes.out"
    original.write_bytes(b"lorem ipsum dolor sit amet " * 40)

    assert main(["compress", str(original), "-o", str(compressed)]) == 0
    assert main(["decompress", str(compressed), "-o", str(restored)]) == 0

    assert restored.read_bytes() == original.read_bytes()
    assert "Bits written:" in capsys.readouterr().out


def test_cli_corrupt_input(tmp_path, capsys):
    broken = tmp_path / "broken.hf"
    restored = tmp_path / "broken.out"
    broken.write_bytes(b"not a huffman stream")

    assert main(["decompress", str(broken), "-o", str(restored)]) == 1
    assert not restored.exists()
    assert "Error: illegal header" in capsys.readouterr().err


def test_cli_missing_input(tmp_path, capsys):
    assert main(["compress", str(tmp_path / "absent"), "-o", str(tmp_path / "x")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_cli_without_command(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out
