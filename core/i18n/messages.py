"""
User-facing message strings for Oscarbot.

All chat replies are looked up here by key so the wording lives in one
place. Placeholders use str.format syntax, e.g. ``{repository}``.
"""

from typing import Dict


MESSAGES: Dict[str, str] = {
    # Session / repository validation
    "repositoryRequest": "What is the repository name?",
    "repositoryInvalid": (
        "'{repository}' doesn't look like a valid repo name, can you type it "
        "again? Don't forget to include the owner, such as 'twbs/bootstrap'."
    ),
    "repositoryNotFound": (
        "I'm sorry, I couldn't find a GitHub repo called {repository}. Can you "
        "make sure I have access to the repo if it is private, ensure the name "
        "is in the format 'user/project' and type it again?"
    ),
    "repositoryCheckFailed": "Sorry, there was a problem checking that repository.",
    "unknownIntent": "Sorry, I don't know how to help with that yet.",
    # ForkProject
    "forkProjectRequestUsername": "What is your GitHub username?",
    "forkProjectRequestPassword": "What is your GitHub password?",
    "forkProjectConfirm": "Do you want me to fork {repository} to {username}'s account?",
    "forkProjectDenied": "Ok, I will not fork the repository.",
    "forkProjectSuccessResponse": "Done! I've forked {repository} to {fork}.",
    "forkProjectFailed": "Sorry, there was a problem forking the project.",
}


def translate(key: str, **params: str) -> str:
    """Return the message for ``key`` with ``params`` substituted.

    Raises KeyError for unknown keys.
    """
    template = MESSAGES[key]
    return template.format(**params) if params else template
