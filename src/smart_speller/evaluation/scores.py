"""
Scores derived from a confusion matrix.

The matrix maps each gold (correct) category to the counts of the categories
the system answered for it, e.g. ``{"cat": {"cat": 8, "dog": 2}}``. Per
category counts are computed once and cached; system level figures are
reported both macro averaged (mean over the gold categories) and micro
averaged (pooled counts).
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from smart_speller.error_handling import raise_processing_error
from smart_speller.logging_utils import create_service_logger

logger = create_service_logger("smart_speller.evaluation.scores")

DIVIDER = "-" * 90
NAME_WIDTH = 30
CELL_WIDTH = 6

ConfusionMatrix = Mapping[str, Mapping[str, int]]


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator > 0 else 0.0


def _harmonic_mean(precision: float, recall: float) -> float:
    return _ratio(2 * precision * recall, precision + recall)


class CategoryCounts(BaseModel):
    """Hits and misses for one category."""

    model_config = ConfigDict(frozen=True)

    category: str
    tp: int  # hits
    tn: int  # correct rejections
    fp: int  # spurious (type I)
    fn: int  # missing (type II)

    @property
    def precision(self) -> float:
        return _ratio(self.tp, self.tp + self.fp)

    @property
    def recall(self) -> float:
        return _ratio(self.tp, self.tp + self.fn)

    @property
    def f1(self) -> float:
        return _harmonic_mean(self.precision, self.recall)

    @property
    def accuracy(self) -> float:
        correct = self.tp + self.tn
        return _ratio(correct, correct + self.fp + self.fn)


class Scores:
    """Precision, recall, F1 and accuracy over a confusion matrix."""

    def __init__(self, matrix: ConfusionMatrix) -> None:
        self.matrix = matrix
        self._counts: dict[str, CategoryCounts] = {}

    def counts(self, category: str) -> CategoryCounts:
        if category not in self._counts:
            self._counts[category] = self._compute(category)
        return self._counts[category]

    def _compute(self, category: str) -> CategoryCounts:
        tp = fn = 0
        for system, count in self.matrix.get(category, {}).items():
            if system == category:
                tp += count
            else:
                fn += count

        answered = tn = 0
        for row in self.matrix.values():
            if category in row:
                answered += row[category]
            else:
                # A gold row that never produced this category counts once
                tn += 1

        return CategoryCounts(category=category, tp=tp, tn=tn, fp=answered - tp, fn=fn)

    def categories(self) -> list[str]:
        """Sorted union of gold and system categories."""
        found = set(self.matrix)
        for row in self.matrix.values():
            found.update(row)
        return sorted(found)

    # Counts: per category when given one, summed over the gold categories otherwise

    def tp(self, category: str | None = None) -> int:
        return self._total("tp", category)

    def tn(self, category: str | None = None) -> int:
        return self._total("tn", category)

    def fp(self, category: str | None = None) -> int:
        return self._total("fp", category)

    def fn(self, category: str | None = None) -> int:
        return self._total("fn", category)

    def _total(self, field: str, category: str | None) -> int:
        if category is not None:
            return getattr(self.counts(category), field)
        return sum(getattr(self.counts(gold), field) for gold in self.matrix)

    # Ratios: per category when given one, macro averaged otherwise

    def precision(self, category: str | None = None) -> float:
        if category is not None:
            return self.counts(category).precision
        return self._macro("precision")

    def recall(self, category: str | None = None) -> float:
        if category is not None:
            return self.counts(category).recall
        return self._macro("recall")

    def f1(self, category: str | None = None) -> float:
        if category is not None:
            return self.counts(category).f1
        return _harmonic_mean(self.precision(), self.recall())

    def accuracy(self, category: str | None = None) -> float:
        if category is not None:
            return self.counts(category).accuracy
        return self._macro("accuracy")

    def _macro(self, field: str) -> float:
        if not self.matrix:
            return 0.0
        return sum(getattr(self.counts(gold), field) for gold in self.matrix) / len(self.matrix)

    def precision_micro(self) -> float:
        return _ratio(self.tp(), self.tp() + self.fp())

    def recall_micro(self) -> float:
        return _ratio(self.tp(), self.tp() + self.fn())

    def f1_micro(self) -> float:
        return _harmonic_mean(self.precision_micro(), self.recall_micro())

    def accuracy_micro(self) -> float:
        correct = self.tp() + self.tn()
        return _ratio(correct, correct + self.fp() + self.fn())

    def format_scores(self) -> str:
        """Per category and system scores as comma separated, fixed width text."""
        header = f"{{:>{NAME_WIDTH}}}," + ",".join([f"{{:>{CELL_WIDTH}}}"] * 7)
        row = (
            f"{{:>{NAME_WIDTH}}},"
            + ",".join([f"{{:>{CELL_WIDTH}}}"] * 4)
            + ",{:.4f},{:.4f},{:.4f}"
        )

        lines = [
            DIVIDER,
            header.format("CATEGORY", "C", "I", "S", "M", "P", "R", "F"),
            header.format("", "(tp)", "(tn)", "(fp)", "(fn)", "(prec)", "(rec)", "(f1)"),
            DIVIDER,
        ]
        for category in self.categories():
            counts = self.counts(category)
            lines.append(
                row.format(
                    category,
                    counts.tp,
                    counts.tn,
                    counts.fp,
                    counts.fn,
                    counts.precision,
                    counts.recall,
                    counts.f1,
                )
            )
        lines.append(DIVIDER)
        lines.append(
            row.format(
                "(MICRO)",
                "N/A",
                "N/A",
                "N/A",
                "N/A",
                self.precision_micro(),
                self.recall_micro(),
                self.f1_micro(),
            )
        )
        lines.append(
            row.format(
                "(MACRO)",
                self.tp(),
                self.tn(),
                self.fp(),
                self.fn(),
                self.precision(),
                self.recall(),
                self.f1(),
            )
        )
        return "\n".join(lines) + "\n"

    def format_matrix(self) -> str:
        """The confusion matrix with gold rows and system columns; zero cells show '.'."""
        categories = self.categories()
        lines = ["," + ",".join(categories)]
        for gold in categories:
            row = self.matrix.get(gold, {})
            cells = [
                f"{row[system]:>{CELL_WIDTH}}" if row.get(system) else f"{'.':>{CELL_WIDTH}}"
                for system in categories
            ]
            lines.append(f"{gold:>{NAME_WIDTH}}," + ",".join(cells) + ",")
        return "\n".join(lines) + "\n"

    def write_scores(self, path: str | Path) -> Path:
        return self._write(Path(path), self.format_scores(), "write_scores")

    def write_matrix(self, path: str | Path) -> Path:
        return self._write(Path(path), self.format_matrix(), "write_matrix")

    def _write(self, path: Path, text: str, operation: str) -> Path:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise_processing_error(
                service="smart_speller",
                operation=operation,
                message=f"Cannot write report to {path}: {e}",
                path=str(path),
            )
        logger.info("Report written", operation=operation, path=str(path))
        return path
