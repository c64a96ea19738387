"""Built-in Software Product Health Score hierarchy."""

from spha.domain.models.hierarchy import KpiEdge, KpiHierarchy, KpiNode
from spha.domain.models.kpi import KpiStrategyId, KpiType


def _raw_value_node(kpi_type: KpiType, display_name: str) -> KpiNode:
    return KpiNode(
        type_id=kpi_type,
        display_name=display_name,
        strategy=KpiStrategyId.RAW_VALUE,
    )


def default_hierarchy() -> KpiHierarchy:
    """Build the default hierarchy.

    Leaf definitions such as checked-in binaries and documentation are
    referenced from more than one parent; binding expands them per position.

    Scoring choices that affect the default scores:
        - SIGNED_COMMITS_RATIO is signed commits / all commits. The inverse
          order is at least 100 for any repository and always clamps.
        - Both MAXIMAL_VULNERABILITY nodes (dependencies and containers) use
          MINIMUM. Vulnerability scores are 100 - severity * 10, so the most
          severe finding has the lowest score; MAXIMUM would report the
          least severe one instead.
    """
    secrets = _raw_value_node(KpiType.SECRETS, "Secrets")
    documentation_infrastructure = _raw_value_node(
        KpiType.DOCUMENTATION_INFRASTRUCTURE, "Documentation Infrastructure"
    )
    comments_in_code = _raw_value_node(KpiType.COMMENTS_IN_CODE, "Comments in Code")
    number_of_commits = _raw_value_node(KpiType.NUMBER_OF_COMMITS, "Number of Commits")
    number_of_signed_commits = _raw_value_node(
        KpiType.NUMBER_OF_SIGNED_COMMITS, "Number of Signed Commits"
    )
    is_default_branch_protected = _raw_value_node(
        KpiType.IS_DEFAULT_BRANCH_PROTECTED, "Is Default Branch Protected?"
    )
    checked_in_binaries = _raw_value_node(
        KpiType.CHECKED_IN_BINARIES, "Checked In Binaries"
    )
    code_vulnerabilities = _raw_value_node(
        KpiType.CODE_VULNERABILITY_SCORE, "Code Vulnerabilities"
    )
    container_vulnerabilities = _raw_value_node(
        KpiType.CONTAINER_VULNERABILITY_SCORE, "Container Vulnerabilities"
    )

    signed_commits_ratio = KpiNode(
        type_id=KpiType.SIGNED_COMMITS_RATIO,
        display_name="Signed Commits Ratio",
        strategy=KpiStrategyId.WEIGHTED_RATIO,
        edges=[
            KpiEdge(target=number_of_signed_commits, weight=1.0),
            KpiEdge(target=number_of_commits, weight=1.0),
        ],
    )

    documentation = KpiNode(
        type_id=KpiType.DOCUMENTATION,
        display_name="Documentation",
        strategy=KpiStrategyId.WEIGHTED_AVERAGE,
        edges=[
            KpiEdge(target=documentation_infrastructure, weight=0.6),
            KpiEdge(target=comments_in_code, weight=0.4),
        ],
    )

    process_compliance = KpiNode(
        type_id=KpiType.PROCESS_COMPLIANCE,
        display_name="Process Compliance",
        strategy=KpiStrategyId.WEIGHTED_AVERAGE,
        edges=[
            KpiEdge(target=checked_in_binaries, weight=0.2),
            KpiEdge(target=signed_commits_ratio, weight=0.2),
            KpiEdge(target=is_default_branch_protected, weight=0.3),
            KpiEdge(target=documentation, weight=0.3),
        ],
    )

    process_transparency = KpiNode(
        type_id=KpiType.PROCESS_TRANSPARENCY,
        display_name="Process Transparency",
        strategy=KpiStrategyId.WEIGHTED_AVERAGE,
        edges=[KpiEdge(target=signed_commits_ratio, weight=1.0)],
    )

    # Vulnerability scores are "100 - severity", so the worst one is the minimum
    max_dependency_vulnerability = KpiNode(
        type_id=KpiType.MAXIMAL_VULNERABILITY,
        display_name="Maximal Dependency Vulnerability",
        strategy=KpiStrategyId.MINIMUM,
        edges=[KpiEdge(target=code_vulnerabilities, weight=1.0)],
    )

    max_container_vulnerability = KpiNode(
        type_id=KpiType.MAXIMAL_VULNERABILITY,
        display_name="Maximal Container Vulnerability",
        strategy=KpiStrategyId.MINIMUM,
        edges=[KpiEdge(target=container_vulnerabilities, weight=1.0)],
    )

    security = KpiNode(
        type_id=KpiType.SECURITY,
        display_name="Security",
        strategy=KpiStrategyId.WEIGHTED_AVERAGE,
        edges=[
            KpiEdge(target=secrets, weight=0.2),
            KpiEdge(target=max_dependency_vulnerability, weight=0.35),
            KpiEdge(target=max_container_vulnerability, weight=0.35),
            KpiEdge(target=checked_in_binaries, weight=0.1),
        ],
    )

    internal_quality = KpiNode(
        type_id=KpiType.INTERNAL_QUALITY,
        display_name="Internal Quality",
        strategy=KpiStrategyId.WEIGHTED_AVERAGE,
        edges=[KpiEdge(target=documentation, weight=1.0)],
    )

    external_quality = KpiNode(
        type_id=KpiType.EXTERNAL_QUALITY,
        display_name="External Quality",
        strategy=KpiStrategyId.WEIGHTED_AVERAGE,
        edges=[KpiEdge(target=documentation, weight=1.0)],
    )

    root = KpiNode(
        type_id=KpiType.ROOT,
        display_name="Software Product Health Score",
        strategy=KpiStrategyId.WEIGHTED_AVERAGE,
        edges=[
            KpiEdge(target=process_transparency, weight=0.1),
            KpiEdge(target=process_compliance, weight=0.1),
            KpiEdge(target=security, weight=0.4),
            KpiEdge(target=internal_quality, weight=0.15),
            KpiEdge(target=external_quality, weight=0.25),
        ],
    )

    return KpiHierarchy.create(root)
