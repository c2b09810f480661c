#!/usr/bin/env python3

""" pmf2bin.py: Convert a premaster archive (.pmf + .pmf.ff) into a
CD-ROM XA BIN/CUE image with rebuilt Mode 2 Form 1 EDC/ECC.
"""
import os
import sys
import logging
import inquirer
from pmf.utils import restore_dict, remember_directory, SETTINGS_NAME
from pmf.errors import PremasterError
from pmf.premaster.convert import convert
from pmf.premaster.utilities import msf_string

try:
    # settings are cached next to the script
    script_dir = os.path.abspath(os.path.dirname(__file__))
except NameError:
    script_dir = os.getcwd()

__version__ = '1.0'

# Require at least Python 3.7
assert sys.version_info >= (3, 7)

logger = logging.getLogger('pmf2bin')


def setup_logging():
    level = os.environ.get('PMF2BIN_LOG_LEVEL', 'INFO').upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO),
                        format='%(levelname)s %(name)s: %(message)s')


def ask_for_path(settings):
    last_dir = settings.get('last_dir', os.getcwd())
    # inquirer formats messages with str.format
    shown_dir = last_dir.replace('{', '{{').replace('}', '}}')
    last_path = settings.get('last_path')
    # a FILE question validates its default, so only an existing file may be offered
    default = last_path if last_path and os.path.isfile(last_path) else None
    questions = [inquirer.Path('path',
                               message=f'Premaster file (.pmf or .pmf.ff), last folder: {shown_dir}',
                               default=default,
                               path_type=inquirer.Path.FILE,
                               exists=True)]
    answer = inquirer.prompt(questions)
    if not answer:
        return None
    return answer['path'].strip()


def print_track_table(tracks):
    print("\nTrack  Type   Pregap  Start       End         Index 01")
    print("========================================================")
    for track in tracks:
        print(f"{track.num:<7}{track.type_name:<7}{track.pregap:<8}{track.start:<12}{track.end:<12}{msf_string(track.start)}")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    setup_logging()
    settings = restore_dict(SETTINGS_NAME, script_dir)

    if argv:
        path = argv[0]
    else:
        path = ask_for_path(settings)
        if not path:
            print(f'Usage: {os.path.basename(sys.argv[0])} <file.pmf.ff>')
            return 1

    try:
        result = convert(path)
    except PremasterError as e:
        logger.error(f"Conversion of {path} failed: {e}")
        return 1

    remember_directory(settings, path, script_dir)
    print_track_table(result.tracks)
    print('\nDone!')
    return 0


if __name__ == "__main__":
    sys.exit(main())
