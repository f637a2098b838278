import io

import pytest

from parnumerics import cli, integration
from parnumerics.dataset import write_grid_dataset
from parnumerics.linear_systems import write_random_matrix


class FakeInput:
    def __init__(self, replies):
        self.replies = list(replies)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.replies:
            raise EOFError
        return self.replies.pop(0)


class Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


def run(replies):
    fake = FakeInput(replies)
    out = io.StringIO()
    pause = Counter()
    code = cli.run_menu(fake, out, pause)
    return code, out.getvalue(), pause, fake


@pytest.mark.parametrize(
    "reply, expected",
    [("3", 3), ("  2\n", 2), ("7xyz", 7), ("-1", -1), ("abc", None), ("", None)],
)
def test_read_choice_parses_leading_integer(reply, expected):
    fake = FakeInput([reply])
    assert cli.read_choice("Enter choice: ", fake) == expected
    assert fake.prompts == ["Enter choice: "]


def test_exit_from_top_menu():
    code, text, pause, fake = run(["2"])
    assert code == 0
    assert "Welcome to Numerical Integration Code!" in text
    assert "Numerical Differentation" not in text
    assert len(fake.prompts) == 1


def test_exit_from_method_menu():
    code, text, pause, _ = run(["1", "4"])
    assert code == 0
    assert "3. Linear Matrix Systems" in text
    assert pause.calls == 0


def test_unrecognised_section_ends_program():
    code, _, pause, fake = run(["1", "9", "1"])
    assert code == 0
    assert pause.calls == 0
    assert fake.replies == ["1"]


def test_end_of_input_returns_zero():
    code, _, _, _ = run(["1"])
    assert code == 0


def test_go_back_clears_screen():
    code, text, pause, _ = run(["1", "1", "3", "4"])
    assert code == 0
    assert cli.CLEAR_SCREEN in text
    assert pause.calls == 0


def test_other_submenu_choice_returns_without_clear():
    _, text, pause, _ = run(["1", "2", "7", "4"])
    assert cli.CLEAR_SCREEN not in text
    assert pause.calls == 0


def test_simpson_benchmark_prints_tables():
    _, text, pause, _ = run(["1", "2", "1", "0", "2", "4", "4"])
    expected = integration.simpson(integration.integrand, 0, 2, 4)
    assert text.count("Parallel Execution with") == len(integration.DEFAULT_THREAD_COUNTS)
    assert "Parallel Execution with  4 Threads:" in text
    assert f"{expected:12f}" in text
    assert pause.calls == 1


def test_trapezoidal_with_zero_intervals_reports_error():
    _, text, pause, _ = run(["1", "2", "2", "0", "2", "0", "4"])
    assert "Error:" in text
    assert "Parallel Execution with" not in text
    assert pause.calls == 1


def test_forward_difference_writes_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write_grid_dataset(cli.DATASET, count=10)
    _, text, pause, _ = run(["1", "1", "1", "5", "4"])
    assert "Function and its Derivative (1 Thread):" in text
    assert "Execution Time (10 Threads)" in text
    assert "Serial Computation Time (Forward Difference)" in text
    lines = (tmp_path / cli.FORWARD_OUTPUT).read_text().splitlines()
    assert lines[0] == "x     | f(x)     | f'(x)"
    assert len(lines) == 2 + 5
    assert pause.calls == 1


def test_backward_difference_rejects_out_of_range_count(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write_grid_dataset(cli.DATASET, count=10)
    _, text, _, _ = run(["1", "1", "2", "1", "200000", "4", "4"])
    assert text.count("Invalid input. Please enter a value between 2 and 100000.") == 2
    assert "Serial Computation Time (Backward Difference)" in text
    lines = (tmp_path / cli.BACKWARD_OUTPUT).read_text().splitlines()
    assert len(lines) == 2 + 4


def test_missing_dataset_reports_error(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _, text, pause, _ = run(["1", "1", "1", "5", "4"])
    assert "Error opening file" in text
    assert not (tmp_path / cli.FORWARD_OUTPUT).exists()
    assert pause.calls == 1


def test_dataset_too_short_reports_error(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write_grid_dataset(cli.DATASET, count=3)
    _, text, _, _ = run(["1", "1", "1", "5", "4"])
    assert "not enough lines" in text


@pytest.mark.parametrize("method", ["1", "2"])
def test_decomposition_without_matrix_file(tmp_path, monkeypatch, method):
    monkeypatch.chdir(tmp_path)
    _, text, pause, _ = run(["1", "3", method, "4"])
    assert "Error opening file." in text
    assert pause.calls == 1


def test_crout_with_too_small_matrix_reports_error(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write_random_matrix(cli.MATRIX_FILE, 3)
    _, text, _, _ = run(["1", "3", "2", "4"])
    assert "not enough values" in text
    assert "Size of Matrix" not in text


def test_main_exits_on_choice_two(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "2")
    assert cli.main([]) == 0
    assert "Welcome to Numerical Integration Code!" in capsys.readouterr().out