import os
from collections import defaultdict



class State:
    """
    The State class holds the counters of a linting run over one or more
    files: where we are and what we have seen so far. The command line tool
    creates one instance and prints it as the final summary.
    """
    def __init__(self):
        # Name of the current input file.
        self.current_file_name = None
        # Number of files read so far.
        self.files_read = 0
        # Number of sentences seen so far (parsed or not).
        self.sentences = 0
        # Number of errors in the current file.
        self.file_errors = 0
        # Error counter. Key: error class; value: error count.
        self.error_counter = defaultdict(int)
        # Files that could not be opened or decoded.
        self.unreadable_files = []

    def start_file(self, filename):
        self.current_file_name = filename
        self.files_read += 1
        self.file_errors = 0

    def count_error(self, err):
        """
        Registers one failed sentence. Returns the number of errors in the
        current file, including this one.
        """
        self.error_counter[err.errclass] += 1
        self.file_errors += 1
        return self.file_errors

    def get_current_file_name(self):
        """
        Returns the current file name in the form suitable for reports
        ('STDIN' instead of '-', basename for paths, 'NONE' otherwise).
        """
        if self.current_file_name:
            if self.current_file_name == '-':
                return 'STDIN'
            else:
                return os.path.basename(self.current_file_name)
        else:
            return 'NONE'

    def __str__(self):
        # Summarize the errors.
        result = f"Files: {self.files_read}, sentences: {self.sentences}\n"
        nerror = 0
        for k, v in sorted(self.error_counter.items()):
            nerror += v
            result += f"{str(k)} errors: {v}\n"
        if self.unreadable_files:
            result += f"Unreadable files: {len(self.unreadable_files)}\n"
        if self.passed():
            result += '*** PASSED ***'
        else:
            result += f'*** FAILED *** with {nerror} errors'
        return result

    def passed(self):
        return not self.unreadable_files and all(v == 0 for v in self.error_counter.values())

    def __bool__(self):
        return self.passed()
