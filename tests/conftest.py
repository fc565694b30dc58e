import subprocess

import pytest

SAMPLE_DDL = """\
-- Customer tables
CREATE TABLE customer (
    id INTEGER NOT NULL,
    name VARCHAR(50) NOT NULL,
    balance DECIMAL(10,2),
    joined DATE,
    PRIMARY KEY (id)
);

CREATE TABLE orders (
  order_id   INTEGER NOT NULL,
  -- free text
  note CHAR(10),
  placed_at TIMESTAMP NOT NULL,
  at_time TIME
);
"""


@pytest.fixture
def ddl_text():
    return SAMPLE_DDL


@pytest.fixture
def ddl_file(tmp_path):
    p = tmp_path / "schema.sql"
    p.write_text(SAMPLE_DDL, encoding="utf-8")
    return p


@pytest.fixture
def data_file(tmp_path):
    p = tmp_path / "customer.dat"
    p.write_text("1|Alice|10.50|2016-01-01\n2|Bob||2016-02-01\n", encoding="utf-8")
    return p


@pytest.fixture
def env(tmp_path):
    from imam_cli.cfg import EnvironmentContext
    return EnvironmentContext(asbhome=str(tmp_path / "ASBNode"), auth_file="/tmp/auth.txt", engine="ENGINE.EXAMPLE.COM")


class FakeIMAM:
    """Stands in for imam.sh and encrypt.sh behind subprocess.run."""

    def __init__(self, listing="", fail=()):
        self.listing = listing
        self.fail = set(fail)
        self.calls = []
        self.param_files = {}
        self.encrypt_code = 0

    def __call__(self, cmd, **kwargs):
        self.calls.append(cmd)
        if cmd[0].endswith("encrypt.sh"):
            if self.encrypt_code:
                return subprocess.CompletedProcess(cmd, self.encrypt_code, "", "bad key")
            return subprocess.CompletedProcess(cmd, 0, "{iisenc}" + cmd[1][::-1] + "\n", "")
        if "list" in cmd:
            return subprocess.CompletedProcess(cmd, 0, self.listing, "")
        name = cmd[cmd.index("-i") + 1]
        if "-pf" in cmd:
            with open(cmd[cmd.index("-pf") + 1]) as f:
                self.param_files[name] = f.read()
        code = 1 if name in self.fail else 0
        return subprocess.CompletedProcess(cmd, code, f"done {name}", "")

    def areas_called(self, action):
        return [c[c.index("-i") + 1] for c in self.calls if action in c]


@pytest.fixture
def fake_imam(monkeypatch, tmp_path):
    from imam_cli import cfg, shell
    fake = FakeIMAM()
    monkeypatch.setattr(shell.subprocess, "run", fake)
    monkeypatch.setitem(cfg.PATHS, "tmp", str(tmp_path))
    return fake
