VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"

ARGV0 = "optextract"
DESCRIPTION = "Classify command-line arguments into options and trailing operands"

OPTION_PREFIXES = ("--", "-")
DISABLE_MARKER = "--"
FLAG_VALUE = "true"

EXTRA_ARGS_ENV = "OPTX_EXTRA_ARGS"
VERBOSE_ENV = "OPTX_VERBOSE"
LOG_FILE_ENV = "OPTX_LOG_FILE"
GRAPH_DIR_ENV = "OPTX_GRAPH_DIR"

GRAPH_FILE = "optextract.gv"
