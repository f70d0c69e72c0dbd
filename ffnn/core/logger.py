"""
Run logging for online training sessions.

A :class:`CoreLogger` writes timestamped lines to a log file (and
optionally to the console) and is handed to
:func:`ffnn.core.online_trainer.train_online` to report epoch progress.
"""
import logging
import os


DEFAULT_LOG_FILENAME = 'log.txt'


class CoreLogger(logging.Logger):
    """ Logger for a training run; not registered with :code:`logging`
    so it never propagates to the root logger
    """

    def __init__(self, filename=None, stdout=True):
        fmt = '[%(asctime)s] %(levelname)-8s %(message)s'
        datefmt = '%Y-%m-%d %H:%M:%S'
        formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

        # Handles when filename is None
        filename = filename or os.path.join(os.path.curdir,
                                            DEFAULT_LOG_FILENAME)

        self.file = filename
        self.stdout = stdout

        logging.Logger.__init__(self, 'Feedforward network training logger')
        self.setLevel(logging.DEBUG)

        fhandler = logging.FileHandler(filename, mode='w')
        fhandler.setFormatter(formatter)
        self.addHandler(fhandler)

        if self.stdout:
            shandler = logging.StreamHandler()
            shandler.setFormatter(formatter)
            self.addHandler(shandler)

    def progress(self, msg, i, n):
        """ Log `msg` at INFO level prefixed by a zero-padded `(i / n)`
        counter
        """
        msg = "(%%0%dd / %d) %s" % (len(str(n)), n, msg)
        self.info(msg % i)

    def network_summary(self, network, n_examples, n_epochs):
        """ Log the network configuration at the start of a training run
        """
        n_input, n_hidden, n_output = network.shape
        msg = ("Training network {}-{}-{} (learning rate {}) on {} examples "
               "for {} epoch(s)")
        self.info(msg.format(n_input, n_hidden, n_output,
                             network.learning_rate, n_examples, n_epochs))

    def close(self):
        """ Close and detach every handler (releases the log file)
        """
        for handler in list(self.handlers):
            handler.close()
            self.removeHandler(handler)
