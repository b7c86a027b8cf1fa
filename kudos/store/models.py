"""Typed contribution records persisted by the kudos store."""

from __future__ import annotations

import enum

import msgspec


class ContributionType(enum.StrEnum):
    """Kind of GitHub object a contribution refers to."""

    PULL_REQUEST = "PullRequest"
    ISSUE = "Issue"


class ContributionRecord(msgspec.Struct, kw_only=True, frozen=True):
    """A single kudo: one user opening one pull request or issue.

    Records are written once and never updated. Several records may share
    the same ``user``; no uniqueness is enforced beyond the table key.

    Attributes
    ----------
    user : str
        GitHub login of the contributor. Partition key of the table.
    time : int
        GitHub-reported creation time in epoch seconds.
    contribution_type : ContributionType
        Whether the contribution is a pull request or an issue.
    contribution_url : str
        GitHub API URL of the source object.
    contribution_name : str
        Title of the pull request or issue.

    """

    user: str
    time: int
    contribution_type: ContributionType
    contribution_url: str
    contribution_name: str
