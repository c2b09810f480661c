import os
import pickle

import logging
logger = logging.getLogger(__name__)

SETTINGS_NAME = 'settings'


def save_data(data_to_save, name, directory):
    with open(directory + os.sep + name + '.cache', 'wb') as f:
        pickle.dump(data_to_save, f)


def restore_dict(name, directory='.'):
    try:
        with open(directory + os.sep + name + '.cache', 'rb') as f:
            data = pickle.load(f)
    except (OSError, pickle.UnpicklingError, EOFError) as e:
        logger.debug(f"No usable {name} cache in {directory}: {e}")
        return {}
    return data if isinstance(data, dict) else {}


def remember_directory(settings, path, directory):
    '''
    stores the last converted archive and its folder so the next
    interactive prompt can start there
    '''
    settings['last_path'] = os.path.abspath(path)
    settings['last_dir'] = os.path.dirname(settings['last_path'])
    try:
        save_data(settings, SETTINGS_NAME, directory)
    except OSError as e:
        logger.warning(f"Could not save settings to {directory}: {e}")
