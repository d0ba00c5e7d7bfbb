from __future__ import annotations

from collections import OrderedDict
from collections.abc import Iterable

from ideascout.domain.models import Finding, IdeaCluster


class ClusterService:
    """Group findings into idea clusters by their tail phrase."""

    @staticmethod
    def cluster_key(finding: Finding) -> str:
        return finding.tail_phrase.lower()

    def group_by_tail(self, findings: Iterable[Finding]) -> OrderedDict[str, list[Finding]]:
        grouped: OrderedDict[str, list[Finding]] = OrderedDict()
        for finding in findings:
            grouped.setdefault(self.cluster_key(finding), []).append(finding)
        return grouped

    def cluster_findings(self, findings: Iterable[Finding]) -> list[IdeaCluster]:
        """Build one cluster per tail phrase, most frequent first.

        ``sorted`` is stable, so equally sized clusters keep first-seen order.
        """
        results = [
            IdeaCluster(tail_phrase=tail, count=len(members), examples=members)
            for tail, members in self.group_by_tail(findings).items()
        ]
        return sorted(results, key=lambda cluster: cluster.count, reverse=True)
