"""GitHub search query building."""


def build_status_query(repository: str, labels: list[str] | None = None) -> str:
    """Build the search query listing the issues of one repository.

    Args:
        repository: Repository in ``owner/name`` form
        labels: Status labels to restrict the search to. GitHub treats a
            comma-separated ``label:`` qualifier as OR.

    Returns:
        GitHub search query string

    Example:
        >>> build_status_query("aws/aws-cdk-rfcs", ["status/done", "status/stale"])
        "repo:aws/aws-cdk-rfcs is:issue label:status/done,status/stale"
    """
    query_parts = [f"repo:{repository}", "is:issue"]

    if labels:
        query_parts.append(f"label:{','.join(labels)}")

    return " ".join(query_parts)
