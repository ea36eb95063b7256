"""Profile heuristics: follower skew, missing bio, stale account, no audience."""

from __future__ import annotations

import math

from gitroast.analyzers.base import BaseAnalyzer
from gitroast.models.records import Profile
from gitroast.models.roast import DetectorResult
from gitroast.utils.helpers import age_in_years

FOLLOWING_SKEW_FACTOR = 2
STALE_ACCOUNT_YEARS = 2
STALE_ACCOUNT_MAX_REPOS = 5
ZERO_AUDIENCE_MIN_REPOS = 10

SKEW_ROAST = "Following more people than you have followers? Someone's a little desperate for connections! 👥💔"
MISSING_BIO_ROAST = "No bio? Let me guess... you're also the person who doesn't fill out their LinkedIn profile! 📝🙈"
STALE_ACCOUNT_ROAST = (
    "{years} years on GitHub and only {repos} public repos? "
    "You're aging slower than your commit count! ⏳👴"
)
ZERO_AUDIENCE_ROAST = "Zero followers but lots of repos? You're coding in a void, my friend! 🕳️👤"


class ProfileAnalyzer(BaseAnalyzer):
    """Scan the account profile; every detector is evaluated independently."""

    def analyze(self, profile: Profile) -> DetectorResult:
        result = DetectorResult()

        if profile.following > profile.followers * FOLLOWING_SKEW_FACTOR and profile.followers > 0:
            result.roasts.append(SKEW_ROAST)

        if not profile.bio:
            result.roasts.append(MISSING_BIO_ROAST)

        account_age = age_in_years(profile.created_at, self.now())
        if (
            account_age is not None
            and account_age > STALE_ACCOUNT_YEARS
            and profile.public_repos < STALE_ACCOUNT_MAX_REPOS
        ):
            result.roasts.append(
                STALE_ACCOUNT_ROAST.format(years=math.floor(account_age), repos=profile.public_repos)
            )

        if profile.followers == 0 and profile.public_repos > ZERO_AUDIENCE_MIN_REPOS:
            result.roasts.append(ZERO_AUDIENCE_ROAST)

        self.log_result(result)
        return result
