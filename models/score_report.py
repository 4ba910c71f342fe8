# models/score_report.py
from datetime import datetime, timezone


class ScoreReport:
    """Result of a completed assessment: three category percentages, the overall score and its recommendation."""

    def __init__(self, report_data):
        self.overall = int(report_data.get('overall', 0))
        self.psychometric = int(report_data.get('psychometric', 0))
        self.technical = int(report_data.get('technical', 0))
        self.wiscar = int(report_data.get('wiscar', 0))
        self.recommendation = report_data.get('recommendation', '')
        self.completed_at = report_data.get('completed_at') or datetime.now(timezone.utc).isoformat()

    def to_dict(self):
        return {
            'overall': self.overall,
            'psychometric': self.psychometric,
            'technical': self.technical,
            'wiscar': self.wiscar,
            'recommendation': self.recommendation,
            'completed_at': self.completed_at
        }

    @classmethod
    def from_dict(cls, report_data):
        """Rebuild a report stored in the session; returns None when nothing was stored"""
        if not report_data:
            return None
        return cls(report_data)

    def __eq__(self, other):
        if not isinstance(other, ScoreReport):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return (f"ScoreReport(overall={self.overall}, psychometric={self.psychometric}, "
                f"technical={self.technical}, wiscar={self.wiscar})")
