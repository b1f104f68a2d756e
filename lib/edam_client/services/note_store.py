"""EDAM NoteStore service description and callback stub."""
from __future__ import annotations

from ..stubs import build_stub
from . import BINARY, BOOL, I32, STRING, STRUCT, TOKEN, arg, method, table

PUBLIC_THROWS = {1: "EDAMSystemException", 2: "EDAMNotFoundException"}
SHARED_THROWS = {1: "EDAMUserException", 2: "EDAMNotFoundException", 3: "EDAMSystemException"}


def _token_only(name: str):
    return method(name, arg(1, TOKEN, STRING))


def _by_guid(name: str, alias: str = "guid", void: bool = False):
    return method(name, arg(1, TOKEN, STRING), arg(2, alias, STRING), void=void)


def _with_struct(name: str, alias: str, void: bool = False):
    return method(name, arg(1, TOKEN, STRING), arg(2, alias, STRUCT), void=void)


METHODS = table(
    _token_only("getSyncState"),
    method(
        "getFilteredSyncChunk",
        arg(1, TOKEN, STRING),
        arg(2, "afterUSN", I32),
        arg(3, "maxEntries", I32),
        arg(4, "filter", STRUCT),
    ),
    _with_struct("getLinkedNotebookSyncState", "linkedNotebook"),
    method(
        "getLinkedNotebookSyncChunk",
        arg(1, TOKEN, STRING),
        arg(2, "linkedNotebook", STRUCT),
        arg(3, "afterUSN", I32),
        arg(4, "maxEntries", I32),
        arg(5, "fullSyncOnly", BOOL),
    ),
    _token_only("listNotebooks"),
    _token_only("listAccessibleBusinessNotebooks"),
    _by_guid("getNotebook"),
    _token_only("getDefaultNotebook"),
    _with_struct("createNotebook", "notebook"),
    _with_struct("updateNotebook", "notebook"),
    _by_guid("expungeNotebook"),
    _token_only("listTags"),
    _by_guid("listTagsByNotebook", "notebookGuid"),
    _by_guid("getTag"),
    _with_struct("createTag", "tag"),
    _with_struct("updateTag", "tag"),
    _by_guid("untagAll", void=True),
    _by_guid("expungeTag"),
    _token_only("listSearches"),
    _by_guid("getSearch"),
    _with_struct("createSearch", "search"),
    _with_struct("updateSearch", "search"),
    _by_guid("expungeSearch"),
    method(
        "findNoteOffset",
        arg(1, TOKEN, STRING),
        arg(2, "filter", STRUCT),
        arg(3, "guid", STRING),
    ),
    method(
        "findNotesMetadata",
        arg(1, TOKEN, STRING),
        arg(2, "filter", STRUCT),
        arg(3, "offset", I32),
        arg(4, "maxNotes", I32),
        arg(5, "resultSpec", STRUCT),
    ),
    method(
        "findNoteCounts",
        arg(1, TOKEN, STRING),
        arg(2, "filter", STRUCT),
        arg(3, "withTrash", BOOL),
    ),
    method(
        "getNoteWithResultSpec",
        arg(1, TOKEN, STRING),
        arg(2, "guid", STRING),
        arg(3, "resultSpec", STRUCT),
    ),
    method(
        "getNote",
        arg(1, TOKEN, STRING),
        arg(2, "guid", STRING),
        arg(3, "withContent", BOOL),
        arg(4, "withResourcesData", BOOL),
        arg(5, "withResourcesRecognition", BOOL),
        arg(6, "withResourcesAlternateData", BOOL),
    ),
    _by_guid("getNoteApplicationData"),
    method(
        "getNoteApplicationDataEntry",
        arg(1, TOKEN, STRING),
        arg(2, "guid", STRING),
        arg(3, "key", STRING),
    ),
    method(
        "setNoteApplicationDataEntry",
        arg(1, TOKEN, STRING),
        arg(2, "guid", STRING),
        arg(3, "key", STRING),
        arg(4, "value", STRING),
    ),
    method(
        "unsetNoteApplicationDataEntry",
        arg(1, TOKEN, STRING),
        arg(2, "guid", STRING),
        arg(3, "key", STRING),
    ),
    _by_guid("getNoteContent"),
    method(
        "getNoteSearchText",
        arg(1, TOKEN, STRING),
        arg(2, "guid", STRING),
        arg(3, "noteOnly", BOOL),
        arg(4, "tokenizeForIndexing", BOOL),
    ),
    _by_guid("getResourceSearchText"),
    _by_guid("getNoteTagNames"),
    _with_struct("createNote", "note"),
    _with_struct("updateNote", "note"),
    _by_guid("deleteNote"),
    _by_guid("expungeNote"),
    method(
        "copyNote",
        arg(1, TOKEN, STRING),
        arg(2, "noteGuid", STRING),
        arg(3, "toNotebookGuid", STRING),
    ),
    _by_guid("listNoteVersions", "noteGuid"),
    method(
        "getNoteVersion",
        arg(1, TOKEN, STRING),
        arg(2, "noteGuid", STRING),
        arg(3, "updateSequenceNum", I32),
        arg(4, "withResourcesData", BOOL),
        arg(5, "withResourcesRecognition", BOOL),
        arg(6, "withResourcesAlternateData", BOOL),
    ),
    method(
        "getResource",
        arg(1, TOKEN, STRING),
        arg(2, "guid", STRING),
        arg(3, "withData", BOOL),
        arg(4, "withRecognition", BOOL),
        arg(5, "withAttributes", BOOL),
        arg(6, "withAlternateData", BOOL),
    ),
    _by_guid("getResourceApplicationData"),
    _with_struct("updateResource", "resource"),
    _by_guid("getResourceData"),
    method(
        "getResourceByHash",
        arg(1, TOKEN, STRING),
        arg(2, "noteGuid", STRING),
        arg(3, "contentHash", BINARY),
        arg(4, "withData", BOOL),
        arg(5, "withRecognition", BOOL),
        arg(6, "withAlternateData", BOOL),
    ),
    _by_guid("getResourceRecognition"),
    _by_guid("getResourceAlternateData"),
    _by_guid("getResourceAttributes"),
    method(
        "getPublicNotebook",
        arg(1, "userId", I32),
        arg(2, "publicUri", STRING),
        throws=PUBLIC_THROWS,
    ),
    _with_struct("shareNotebook", "sharedNotebook"),
    _with_struct("createLinkedNotebook", "linkedNotebook"),
    _with_struct("updateLinkedNotebook", "linkedNotebook"),
    _token_only("listLinkedNotebooks"),
    _by_guid("expungeLinkedNotebook"),
    method(
        "authenticateToSharedNotebook",
        arg(1, "shareKeyOrGlobalId", STRING),
        arg(2, TOKEN, STRING),
        throws=SHARED_THROWS,
    ),
    _token_only("getSharedNotebookByAuth"),
    _with_struct("emailNote", "parameters", void=True),
    _by_guid("shareNote"),
    _by_guid("stopSharingNote", void=True),
    method(
        "authenticateToSharedNote",
        arg(1, "guid", STRING),
        arg(2, "noteKey", STRING),
        arg(3, TOKEN, STRING),
        throws=SHARED_THROWS,
    ),
    method(
        "findRelated",
        arg(1, TOKEN, STRING),
        arg(2, "query", STRUCT),
        arg(3, "resultSpec", STRUCT),
    ),
    method(
        "setNotebookRecipientSettings",
        arg(1, TOKEN, STRING),
        arg(2, "notebookGuid", STRING),
        arg(3, "recipientSettings", STRUCT),
    ),
    method(
        "manageNotebookShares",
        arg(1, TOKEN, STRING),
        arg(2, "parameters", STRUCT),
    ),
    _by_guid("getNotebookShares", "notebookGuid"),
)

Client = build_stub("NoteStore", METHODS)
