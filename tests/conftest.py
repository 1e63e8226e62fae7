"""Shared inline annex documents for pipeline, API and CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest

HTML_669 = """
<html><body>
  <div class="eli-container" id="anx_I">
    <p class="oj-doc-ti">ANNEX I</p>
    <table>
      <tbody>
        <tr>
          <td><p>Feed and food (intended use)</p></td><td><p>CN code</p></td>
          <td><p>TARIC sub-division</p></td><td><p>Country of origin</p></td>
          <td><p>Hazard</p></td><td><p>Frequency (%)</p></td>
        </tr>
        <tr><td colspan="6"><p class="modref">▼M3</p></td></tr>
        <tr>
          <td><p>Hazelnuts (in shell) (Food)</p></td><td><p>0802 21 00;</p><p>0802 22 00</p></td>
          <td></td><td><p>Turkey (TR)</p></td><td><p>Aflatoxins</p></td><td><p>10</p></td>
        </tr>
        <tr>
          <td rowspan="2"><p>Peppers (2)</p></td><td><p>ex 0709 60 10</p></td><td><p>20</p></td>
          <td><p>Thailand (TH)</p></td><td><p>Pesticide residues (1)</p></td><td><p>10</p></td>
        </tr>
        <tr>
          <td><p>ex 0709 60 10</p></td><td><p>20</p></td>
          <td><p>Viet Nam (VN)</p></td><td><p>Pesticide residues</p></td><td><p>10</p></td>
        </tr>
        <tr><td colspan=""><p>▼B</p></td></tr>
        <tr>
          <td><p>Hazelnuts (in shell) (Food)</p></td><td><p>0802 21 00;</p><p>0802 22 00</p></td>
          <td></td><td><p>Turkey (TR)</p></td><td><p>Aflatoxins</p></td><td><p>10</p></td>
        </tr>
      </tbody>
    </table>
  </div>
</body></html>
"""

HTML_884 = """
<html><body>
  <table>
    <tr>
      <td><p>Feed and food (intended use)</p></td><td><p>CN code</p></td>
      <td><p>TARIC sub-division</p></td><td><p>Country of origin</p></td><td><p>Frequency (%)</p></td>
    </tr>
    <tr>
      <td><p>Hazelnuts (in shell) (Food)</p></td><td><p>0802 21 00</p></td><td></td>
      <td><p>Turkey (TR)</p></td><td><p>50</p></td>
    </tr>
    <tr>
      <td><p>Dried figs (Food)</p></td><td><p>0804 20 90</p></td><td></td>
      <td><p>Turkey (TR)</p></td><td><p>20</p></td>
    </tr>
  </table>
</body></html>
"""


@pytest.fixture
def html_669() -> str:
    return HTML_669


@pytest.fixture
def html_884() -> str:
    return HTML_884


@pytest.fixture
def annex_files(tmp_path: Path) -> tuple[Path, Path]:
    """Write both annex documents to disk and return (669 path, 884 path)."""
    path_669 = tmp_path / "02009R0669.html"
    path_884 = tmp_path / "02014R0884.html"
    path_669.write_text(HTML_669, encoding="utf-8")
    path_884.write_text(HTML_884, encoding="utf-8")
    return path_669, path_884
