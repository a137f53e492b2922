import os

from tqdm import tqdm


class Logger:
    """
    Class for logging self-check progress and failed scrambles

    Parameters
    ----------
    `log_dir` : str
        directory for logging
    `log_filename` : str
        name of file to save logging
    `pbar` : tqdm, optinal
        save tqdm progress bar as object attribute
    `clear` : bool
        whether clear logging file on start
    """
    def __init__(self, log_dir : str = '', log_filename : str = '', clear : bool = False, pbar : tqdm = None):
        self.pbar     = pbar
        self.path     = log_dir
        self.filename = log_filename
        self.filepath = os.path.join(log_dir, log_filename) if log_filename else ''
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        if self.filepath and clear:
            open(self.filepath, 'w').close()

    def tqdmlog(self, message : str, pbar : tqdm = None, to_file : bool = False, attention : bool = False, add_iter_num : bool = False):
        """
        Log message using tqdm progress bar

        Parameters
        ----------
        `message` : str
            Message to log
        `pbar` : tqdm, optional
            tqdm progress bar to write
        `to_file` : bool, optional
            where save log message in file
        `attention` : bool, optional
            whether add '=' sign as attention to message
        `add_iter_num` : bool, optional
            whether add prefix as iteration number to message
        """
        pbar = pbar if self.pbar is None else self.pbar
        if pbar is not None and add_iter_num:
            message = f'{pbar.n:5} | {message}'
        if to_file:
            self.filelog(message)
        if pbar is not None:
            if attention:
                pbar.write('='*len(message))
            pbar.write(message)
            if attention:
                pbar.write('='*len(message))

    def filelog(self, message : str, filepath : str = None):
        """
        Write message to file

        Parameters
        ----------
        `message` : str
            message to log
        `filepath`: str
            Path to file to add save message
        """
        filepath = filepath if filepath is not None else self.filepath
        if filepath:
            with open(filepath, 'a') as f:
                f.write(message + '\n')

    def failurelog(self, failure, to_file : bool = True):
        """
        Log scramble which failed the self-check

        Parameters
        ----------
        `failure` : ValidationFailure
            epoch, scramble moves and the reason of failure
        `to_file` : bool, optional
            where save log message in file
        """
        message = f'epoch {failure.epoch:5} | {" ".join(failure.scramble)} -- {failure.reason}'
        self.tqdmlog(message, to_file=to_file, attention=True)
