OPERATION_NAME = "AccountManagementPageQuery"

PROFILE_QUERY = """fragment userProfilePage on User {
  fbUid
  displayName
  connectCode {
    code
    __typename
  }
  status
  activeSubscription {
    level
    hasGiftSub
    __typename
  }
  rankedNetplayProfile {
    id
    ratingOrdinal
    ratingUpdateCount
    wins
    losses
    dailyGlobalPlacement
    dailyRegionalPlacement
    continent
    characters {
      id
      character
      gameCount
      __typename
    }
    __typename
  }
  __typename
}

query AccountManagementPageQuery($cc: String!, $uid: String!) {
  getUser(fbUid: $uid) {
    ...userProfilePage
    __typename
  }
  getConnectCode(code: $cc) {
    user {
      ...userProfilePage
      __typename
    }
    __typename
  }
}
"""


def build_profile_request(code: str) -> dict[str, object]:
    """JSON body for the ranked-profile lookup of *code*."""
    return {
        "operationName": OPERATION_NAME,
        "variables": {"cc": code, "uid": code},
        "query": PROFILE_QUERY,
    }
