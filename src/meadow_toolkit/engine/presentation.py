"""
Module: engine.presentation

Purpose:
    Map each terminal outcome to its fixed presentation: title, severity
    colour and recommendation text. A static lookup; the only dynamic
    part is the score interpolated into the text.

Key Functions:
    - describe_result(): StageResult to ResultDescriptor

Key Classes:
    - Severity: Colour/severity tag of an outcome
    - ResultDescriptor: Everything a front-end needs to show a result

Dependencies:
    - meadow_toolkit.core.models: OutcomeKind, StageResult

Used By:
    - cli: Plain-text output
    - gui.widgets.result_panel: Result page
"""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Tuple

from meadow_toolkit.core.models import OutcomeKind, StageResult


class Severity(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    POTENTIAL = "potential"
    NONE = "none"

    @property
    def color(self) -> str:
        return _SEVERITY_COLORS[self]


_SEVERITY_COLORS: Dict[Severity, str] = {
    Severity.EXCELLENT: "#2e7d32",
    Severity.GOOD: "#66bb6a",
    Severity.POTENTIAL: "#f57f17",
    Severity.NONE: "#c62828",
}


@dataclass(frozen=True)
class ResultDescriptor:
    """
    Presentation of one terminal outcome.

    Attributes:
        kind: Outcome this describes
        score: Score shown in the text
        title: Headline
        severity: Severity tag (drives the title colour)
        paragraphs: Body paragraphs before the notice box
        notice_label: Heading of the notice box ("Empfehlung:", ...)
        notice: Notice box text
        notice_is_warning: Warning styling instead of info styling
        bullets: Bullet list after the notice box
        closing: Paragraphs after everything else
    """
    kind: OutcomeKind
    score: int
    title: str
    severity: Severity
    paragraphs: Tuple[str, ...]
    notice_label: str
    notice: str
    notice_is_warning: bool = False
    bullets: Tuple[str, ...] = ()
    closing: Tuple[str, ...] = ()

    @property
    def color(self) -> str:
        return self.severity.color

    def to_text(self, width: int = 78) -> str:
        """Render as a plain-text block."""
        lines = [self.title, "=" * len(self.title), ""]
        for paragraph in self.paragraphs:
            lines.extend(textwrap.wrap(paragraph, width))
            lines.append("")
        lines.append(self.notice_label)
        lines.extend(textwrap.wrap(self.notice, width, initial_indent="  ", subsequent_indent="  "))
        lines.append("")
        for bullet in self.bullets:
            lines.extend(textwrap.wrap(bullet, width, initial_indent="- ", subsequent_indent="  "))
        if self.bullets:
            lines.append("")
        for paragraph in self.closing:
            lines.extend(textwrap.wrap(paragraph, width))
            lines.append("")
        return "\n".join(lines).rstrip() + "\n"


def _q2_very_good(score: int) -> ResultDescriptor:
    return ResultDescriptor(
        kind=OutcomeKind.Q2_VERY_GOOD,
        score=score,
        title="Qualitätsstufe II: Sehr gut erfüllt",
        severity=Severity.EXCELLENT,
        paragraphs=(f"Mit {score} Zeigerpflanzen weist Ihre Fläche eine hohe biologische Qualität auf.",),
        notice_label="Empfehlung:",
        notice=(
            "Führen Sie die bisherige Bewirtschaftung fort. "
            "Minimale Anpassungen genügen, um dieses hohe Niveau zu sichern."
        ),
    )


def _q2_good(score: int) -> ResultDescriptor:
    return ResultDescriptor(
        kind=OutcomeKind.Q2_GOOD,
        score=score,
        title="Qualitätsstufe II: Erfüllt",
        severity=Severity.GOOD,
        paragraphs=(f"Mit {score} Zeigerpflanzen erreichen Sie knapp die Qualitätsstufe II.",),
        notice_label="Empfehlung:",
        notice=(
            "Um die Qualität langfristig zu sichern, sollten Sie bestehende Massnahmen optimieren "
            "(z.B. späterer Schnittzeitpunkt oder reduzierter Düngereinsatz)."
        ),
    )


def _mgmt_potential(score: int) -> ResultDescriptor:
    return ResultDescriptor(
        kind=OutcomeKind.MGMT_POTENTIAL,
        score=score,
        title="Bewirtschaftungspotenzial vorhanden",
        severity=Severity.POTENTIAL,
        paragraphs=(
            "Die Q2-Kriterien sind aktuell nicht erfüllt, aber das Potenzial ist gut.",
            f"Score: {score} Punkte (Pflanzen + Standort + Massnahmen)",
        ),
        notice_label="Strategie: Bestandeslenkung",
        notice=(
            "Da Standortfaktoren und Ihre Bereitschaft zu Massnahmen positiv bewertet wurden, "
            "ist eine Aufwertung ohne Neuansaat realistisch. "
            "Fokus: Gräserunterdrückung und Förderung der bestehenden Kräuter."
        ),
        bullets=(
            "Konsequente Umsetzung der gewählten Massnahmen.",
            "Geduld: Entwicklung kann 3-5 Jahre dauern.",
        ),
    )


def _seeding_potential(score: int) -> ResultDescriptor:
    return ResultDescriptor(
        kind=OutcomeKind.SEEDING_POTENTIAL,
        score=score,
        title="Ansaatpotenzial vorhanden",
        severity=Severity.POTENTIAL,
        paragraphs=(
            "Die aktuelle Flora und Bewirtschaftung reichen für eine direkte Aufwertung "
            f"nicht aus (Score: {score}).",
        ),
        notice_label="Strategie: Neuansaat",
        notice=(
            "Da keine Ausschlusskriterien (wie Schatten, Nässe oder Problemunkräuter) vorliegen, "
            "ist eine Neuansaat mit einer standortgerechten Mischung die erfolgversprechendste Option."
        ),
        closing=("Bitte beachten Sie die lokalen Vorgaben zur Saatbettbereitung.",),
    )


def _no_potential(score: int) -> ResultDescriptor:
    return ResultDescriptor(
        kind=OutcomeKind.NO_POTENTIAL,
        score=score,
        title="Kein Aufwertungspotenzial",
        severity=Severity.NONE,
        paragraphs=("Leider ist diese Fläche für das Erreichen der Q2-Qualität ungeeignet.",),
        notice_label="Begründung:",
        notice=(
            "Es liegen Ausschlusskriterien vor (z.B. ungünstige Exposition, Feuchte, "
            "zu hoher Ertrag oder Unkrautdruck). Weder eine Anpassung der Bewirtschaftung "
            "noch eine Ansaat versprechen hier Erfolg."
        ),
        notice_is_warning=True,
    )


_DESCRIBERS: Dict[OutcomeKind, Callable[[int], ResultDescriptor]] = {
    OutcomeKind.Q2_VERY_GOOD: _q2_very_good,
    OutcomeKind.Q2_GOOD: _q2_good,
    OutcomeKind.MGMT_POTENTIAL: _mgmt_potential,
    OutcomeKind.SEEDING_POTENTIAL: _seeding_potential,
    OutcomeKind.NO_POTENTIAL: _no_potential,
}


def describe_result(result: StageResult) -> ResultDescriptor:
    """
    Look up the presentation for a terminal result.

    Example:
        >>> describe_result(StageResult(OutcomeKind.Q2_GOOD, 6)).title
        'Qualitätsstufe II: Erfüllt'
    """
    return _DESCRIBERS[result.kind](result.score)
