"""Test if package imports successfully."""

import pytest


def test1():
    import exactrational
    half = exactrational.new(1, 2)
    assert exactrational.add(half, half) == exactrational.new(1)


def test_public_api():
    import exactrational
    for name in ('Rational', 'new', 'reduce', 'gcd', 'add', 'subtract', 'multiply', 'divide', 'pow',
                 'InvalidArgument', 'DivisionByZero', 'RationalError', 'DisableLogger', 'to_fraction', 'to_sympy'):
        assert hasattr(exactrational, name), f"exactrational.{name} missing"


def test_python_requires_matches_classifiers():
    import re
    from pathlib import Path
    setup_py = (Path(__file__).resolve().parent.parent / "setup.py").read_text()
    required = re.search(r'python_requires=">=3\.(\d+)"', setup_py).group(1)
    classified = re.findall(r'Programming Language :: Python :: 3\.(\d+)', setup_py)
    assert int(required) == min(int(v) for v in classified)
