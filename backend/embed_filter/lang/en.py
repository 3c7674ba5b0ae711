"""English language strings, by component."""

CORE = {
    "choosedots": "Choose...",
    "error": "Error",
    "continue": "Continue",
}

FILTER_EMBEDQUESTION = {
    "attemptoptions": "Attempt options",
    "defaultx": "Default ({$a})",
    "displayoptions": "Display options",
    "embedquestion": "Embed question",
    "errormaxmarknumber": "The maximum mark must be a number.",
    "errornopermissions": "You do not have permission to embed this question.",
    "errorunknownquestion": "Unknown, or unsharable question.",
    "errorvariantoutofrange": "Variant number must be a positive integer at most {$a}.",
    "errorvariantformat": "Variant number must be a positive integer.",
    "filtername": "Embed questions",
    "howquestionbehaves": "How the question behaves",
    "iframetitle": "Embedded question",
    "invalidtoken": "This question may not be embedded here.",
    "markedoutof": "Marked out of",
    "nameandcount": "{$a->name} ({$a->count})",
    "noguests": "Guest users do not have permission to interact with embedded questions.",
    "notyourattempt": "This is not your attempt.",
    "pluginname": "Embed questions",
    "questionidnumber": "Question id number",
    "restart": "Start again",
    "warningfilteroffglobally": "Warning: the embed question filter is disabled in the site-wide filter settings.",
    "warningfilteroffhere": "Warning: the the embed question filter is turned off in this course.",
    "whichquestion": "Which question",
}

STRINGS = {
    "core": CORE,
    "filter_embedquestion": FILTER_EMBEDQUESTION,
}
