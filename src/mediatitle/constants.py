# Variable names used by the built-in title formats
PROGRAM_NAME = "program_name"
SEASON = "season"
EPISODE = "episode"
EPISODE_NAME = "episode_name"
SPLIT = "split"

# Object variable holding the translation used by {:tr(...)}
TRANSLATION = "translation"

MEDIA_VARIABLES = [PROGRAM_NAME, SEASON, EPISODE, EPISODE_NAME, SPLIT]

# Named title formats
BUILTIN_FORMAT_1 = "builtin_1"
BUILTIN_FORMAT_2 = "builtin_2"
CUSTOM_FORMAT = "custom"
DEFAULT_FORMAT_NAME = BUILTIN_FORMAT_1

# Sample values used when previewing a format
PREVIEW_PROGRAM_NAME = "Program name"
PREVIEW_SEASON = 2
PREVIEW_EPISODE = 5
PREVIEW_EPISODE_NAME = "Episode name"

# Characters removed from rendered titles so they can be used as file names
INVALID_FILE_NAME_CHARS = '<>:"/\\|?*'

# Translation strings used by the built-in formats
DEFAULT_TRANSLATIONS = {
    "word_season": "season",
    "word_episode": "episode",
}
