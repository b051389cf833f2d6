from main import parse_args, report_worker_error


class FakeApp:
    def __init__(self):
        self.quit_calls = 0

    def quit(self):
        self.quit_calls += 1


def test_worker_error_quits_app(caplog, capsys):
    app = FakeApp()
    report_worker_error(app, "Could not start hand tracker")

    assert app.quit_calls == 1
    assert "Could not start hand tracker" in caplog.text
    assert "Could not start hand tracker" in capsys.readouterr().out


def test_cli_flags():
    args = parse_args(["--no-dispatch", "--verbose"])
    assert args.no_dispatch
    assert args.verbose
    assert not args.debug
    assert args.config is None
