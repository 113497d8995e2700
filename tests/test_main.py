# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import pytest

from minimatrix.__main__ import SECTIONS, main


def test_main_runs_every_section(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    for name in SECTIONS:
        assert f"==== {name} ====" in out


def test_main_single_section(capsys):
    assert main(["--section", "determinant"]) == 0
    out = capsys.readouterr().out
    assert "-174" in out
    assert "==== inverse ====" not in out


def test_main_reports_singular_inverse(capsys):
    assert main(["--section", "inverse", "-v"]) == 0
    out = capsys.readouterr().out
    assert "not invertible: Matrix is singular and has no inverse" in out
    assert "[0.5, 0.0, 0.0]" in out


def test_main_rejects_unknown_section():
    with pytest.raises(SystemExit):
        main(["--section", "svd"])
