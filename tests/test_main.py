from click.testing import CliRunner

from main import cli


def test_format_command():
    result = CliRunner().invoke(cli, ["format", "M10 10L20 20", "c1 2 3 4 5 6"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["M10,10L20,20", "c1,2 3,4 5,6"]


def test_convert_command():
    result = CliRunner().invoke(cli, ["convert", "m10,10l5,5z"])
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "MoveTo(x=10.0, y=10.0)",
        "LineTo(x=15.0, y=15.0)",
        "ClosePath()",
    ]


def test_bad_path_data_exits_with_error():
    result = CliRunner().invoke(cli, ["convert", "M0,0C1,1"])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_strict_flag():
    runner = CliRunner()
    assert runner.invoke(cli, ["format", "M0,0X1"]).exit_code == 0
    result = runner.invoke(cli, ["--strict", "format", "M0,0X1"])
    assert result.exit_code == 1
    assert "unknown command" in result.output


def test_extract_command(tmp_path, smiley_svg):
    svg_file = tmp_path / "smiley.svg"
    svg_file.write_text(smiley_svg)
    runner = CliRunner()

    result = runner.invoke(cli, ["extract", str(svg_file)])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["M8,14s1.5,2 4,2s4,-2 4,-2", "M9,9h.01"]

    result = runner.invoke(cli, ["extract", str(svg_file), "--convert"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "MoveTo(x=8.0, y=14.0)"
    assert [line.split("(")[0] for line in lines[1:]] == ["CubicCurveTo", "CubicCurveTo", "MoveTo", "LineTo"]


def test_extract_without_paths(tmp_path):
    svg_file = tmp_path / "empty.svg"
    svg_file.write_text('<svg xmlns="http://www.w3.org/2000/svg"/>')
    result = CliRunner().invoke(cli, ["extract", str(svg_file)])
    assert result.exit_code == 0
    assert "No SVG paths found" in result.output
