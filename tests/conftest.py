"""Shared test fixtures for gaussian-bayes tests."""

from __future__ import annotations

from pathlib import Path

import pytest

FLOWERS_CSV = (
    "sepal_length,sepal_width,petal_length,petal_width,species\n"
    "5.1,3.5,1.4,0.2,Iris-setosa\n"
    "4.9,3.0,1.4,0.2,Iris-setosa\n"
    "4.7,3.2,1.3,0.2,Iris-setosa\n"
    "5.0,3.6,1.4,0.2,Iris-setosa\n"
    "7.0,3.2,4.7,1.4,Iris-versicolor\n"
    "6.4,3.2,4.5,1.5,Iris-versicolor\n"
    "6.9,3.1,4.9,1.5,Iris-versicolor\n"
    "5.5,2.3,4.0,1.3,Iris-versicolor\n"
    "6.3,3.3,6.0,2.5,Iris-virginica\n"
    "5.8,2.7,5.1,1.9,Iris-virginica\n"
    "7.1,3.0,5.9,2.1,Iris-virginica\n"
    "6.5,3.0,5.8,2.2,Iris-virginica\n"
)

BANKNOTE_CSV = (
    "variance,skewness,curtosis,entropy,class\n"
    "3.6216,8.6661,-2.8073,-0.44699,0\n"
    "4.5459,8.1674,-2.4586,-1.4621,0\n"
    "3.866,-2.6383,1.9242,0.10645,0\n"
    "3.4566,9.5228,-4.0112,-3.5944,0\n"
    "-1.3971,3.3191,-1.3927,-1.9948,1\n"
    "-2.2918,-7.257,7.9597,0.9211,1\n"
    "-3.5637,-8.3827,12.393,-1.2823,1\n"
    "-2.5419,-0.65804,2.6842,1.1952,1\n"
)


@pytest.fixture
def separable_data() -> tuple[list[list[float]], list[int]]:
    """Two well-separated classes over two features."""
    features = [
        [1.0, 2.0],
        [1.2, 1.8],
        [0.8, 2.2],
        [1.1, 2.1],
        [8.0, 9.0],
        [8.3, 8.7],
        [7.9, 9.2],
        [8.1, 9.1],
    ]
    labels = [0, 0, 0, 0, 1, 1, 1, 1]
    return features, labels


@pytest.fixture
def flowers_csv() -> str:
    return FLOWERS_CSV


@pytest.fixture
def flowers_file(tmp_path: Path) -> Path:
    file = tmp_path / "iris.csv"
    file.write_text(FLOWERS_CSV, encoding="utf-8")
    return file


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory laid out like the built-in dataset directory."""
    directory = tmp_path / "datasets"
    directory.mkdir()
    (directory / "iris.csv").write_text(FLOWERS_CSV, encoding="utf-8")
    (directory / "banknote_authentication.csv").write_text(BANKNOTE_CSV, encoding="utf-8")
    return directory


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep GAUSSIAN_BAYES_* settings and stray .env files out of tests."""
    for name in ("DATA_DIR", "STRICT", "LOG_LEVEL"):
        key = f"GAUSSIAN_BAYES_{name}"
        # setenv first so values a .env file loads are removed on teardown
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
