import logging
from logging.handlers import RotatingFileHandler
from dotenv import load_dotenv
import os

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = "[%(filename)s:%(lineno)s - %(funcName)20s()]  %(message)s"


def setup_logging(logger):
	# Repeated calls (e.g. several runs of main() in one process) must not
	# stack up handlers.
	if logger.handlers:
		return
	load_dotenv()

	log_file = os.getenv("LOG_FILE")
	error_file = os.getenv("ERROR_FILE")
	log_level = os.getenv("LOG_LEVEL", "INFO").upper()

	logger.setLevel(getattr(logging, log_level, logging.INFO))

	console_handler = logging.StreamHandler()
	console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
	console_handler.setLevel(logger.level)
	logger.addHandler(console_handler)

	formatter = logging.Formatter(FILE_FORMAT)
	if log_file:
		file_handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=3)
		file_handler.setFormatter(formatter)
		logger.addHandler(file_handler)
	if error_file:
		error_handler = logging.FileHandler(error_file, "w", encoding="utf-8")
		error_handler.setLevel(logging.ERROR)
		error_handler.setFormatter(formatter)
		logger.addHandler(error_handler)


def pprint(args):

	ret_str = ""
	for key, value in args.items():
		ret_str += f"{key:40} - {str(value):80}\n"

	return ret_str
