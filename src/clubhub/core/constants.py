"""Constants and user-facing messages.

Note: Keep message templates here so the engine, commands and controller agree.
"""

MESSAGE_EVENT_NOT_FOUND = "Event not found"
MESSAGE_MEMBER_NOT_FOUND = "Member not found: {name}"
MESSAGE_MEMBER_NOT_IN_ATTENDANCE = "Member not found in attendance list: {name}"
MESSAGE_MEMBER_ALREADY_ADDED = "Already in attendance list: {names}"

LABEL_NONE = "None"
NAME_SEPARATOR = ", "

# Separator between member names in a single "members" argument.
MEMBER_DELIMITER = "/"

MONEY_PLACES = 2
