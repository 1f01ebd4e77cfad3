import subprocess
import sys
from pathlib import Path

import yaml

ROOT = Path(__file__).resolve().parent.parent

def _run(*args):
    cmd = [sys.executable, "run_analysis.py", *map(str, args)]
    return subprocess.run(cmd, capture_output=True, text=True, cwd=ROOT)

def test_cli_smoke_existing_file(corpus_file, tmp_path):
    dump = tmp_path / "result.yml"
    proc = _run(corpus_file, "--no-generate", "--workers", "1", "--dump", dump)
    output = proc.stdout + proc.stderr
    assert proc.returncode == 0, output
    assert "most frequently appeared numbers" in proc.stdout
    assert "The count of Prime numbers:\n6" in proc.stdout
    assert "The count of Armstrong numbers:\n7" in proc.stdout
    data = yaml.safe_load(dump.read_text())
    assert data["top_frequent"][0] == {"value": "5", "count": 3}

def test_cli_generates_and_analyzes(tmp_path):
    target = tmp_path / "numbers.txt"
    proc = _run(target, "-s", "1", "--workers", "2", "--seed", "3")
    assert proc.returncode == 0, proc.stdout + proc.stderr
    assert target.stat().st_size >= 1024 * 1024
    assert "Time taken to analyze the file" in proc.stdout

def test_cli_invalid_flag():
    proc = _run("file.txt", "--bogus")
    assert proc.returncode != 0
    assert "usage" in proc.stderr.lower()

def test_cli_malformed_corpus(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("1 2 three ")
    proc = _run(path, "--no-generate", "--workers", "1")
    assert proc.returncode == 1
    assert "Malformed token" in proc.stderr
    assert "The count of Prime numbers" not in proc.stdout

def test_cli_config_file(tmp_path, corpus_file):
    config = tmp_path / "run.yml"
    config.write_text(yaml.safe_dump({"top_k": 2, "workers": 1}))
    proc = _run(corpus_file, "--no-generate", "--config", config)
    assert proc.returncode == 0, proc.stdout + proc.stderr
    assert proc.stdout.startswith("2 most frequently appeared numbers")

def test_cli_invalid_config(tmp_path, corpus_file):
    config = tmp_path / "run.yml"
    config.write_text(yaml.safe_dump({"top_k": 0}))
    proc = _run(corpus_file, "--no-generate", "--config", config)
    assert proc.returncode == 1

def test_cli_very_long_token(tmp_path):
    path = tmp_path / "long.txt"
    huge = "9" * 5000
    path.write_text(f"3 {huge} {huge} 4 ")
    dump = tmp_path / "result.yml"
    proc = _run(path, "--no-generate", "--workers", "1", "--dump", dump)
    assert proc.returncode == 0, proc.stdout + proc.stderr
    assert "Traceback" not in proc.stderr
    data = yaml.safe_load(dump.read_text())
    assert data["top_frequent"][0] == {"value": huge, "count": 2}
