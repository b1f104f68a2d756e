"""EDAM UserStore service description and callback stub."""
from __future__ import annotations

from ..stubs import build_stub
from . import BOOL, I16, I32, STRING, TOKEN, arg, method, table

NOT_FOUND_FIRST = {1: "EDAMNotFoundException", 2: "EDAMSystemException", 3: "EDAMUserException"}

METHODS = table(
    method(
        "checkVersion",
        arg(1, "clientName", STRING),
        arg(2, "edamVersionMajor", I16),
        arg(3, "edamVersionMinor", I16),
        throws={},
    ),
    method("getBootstrapInfo", arg(1, "locale", STRING), throws={}),
    method(
        "authenticateLongSession",
        arg(1, "username", STRING),
        arg(2, "password", STRING),
        arg(3, "consumerKey", STRING),
        arg(4, "consumerSecret", STRING),
        arg(5, "deviceIdentifier", STRING),
        arg(6, "deviceDescription", STRING),
        arg(7, "supportsTwoFactor", BOOL),
    ),
    method(
        "completeTwoFactorAuthentication",
        arg(1, TOKEN, STRING),
        arg(2, "oneTimeCode", STRING),
        arg(3, "deviceIdentifier", STRING),
        arg(4, "deviceDescription", STRING),
    ),
    method("revokeLongSession", arg(1, TOKEN, STRING), void=True),
    method("authenticateToBusiness", arg(1, TOKEN, STRING)),
    method("getUser", arg(1, TOKEN, STRING)),
    method("getPublicUserInfo", arg(1, "username", STRING), throws=NOT_FOUND_FIRST),
    method("getUserUrls", arg(1, TOKEN, STRING)),
    method("inviteToBusiness", arg(1, TOKEN, STRING), arg(2, "emailAddress", STRING), void=True),
    method("removeFromBusiness", arg(1, TOKEN, STRING), arg(2, "emailAddress", STRING), void=True),
    method(
        "updateBusinessUserIdentifier",
        arg(1, TOKEN, STRING),
        arg(2, "oldEmailAddress", STRING),
        arg(3, "newEmailAddress", STRING),
        void=True,
    ),
    method("listBusinessUsers", arg(1, TOKEN, STRING)),
    method(
        "listBusinessInvitations",
        arg(1, TOKEN, STRING),
        arg(2, "includeRequestedInvitations", BOOL),
    ),
    method("getAccountLimits", arg(1, "serviceLevel", I32), throws={1: "EDAMUserException"}),
)

Client = build_stub("UserStore", METHODS)
