'''
Hide messages inside PNG files.

 $ pngme encode image.png ruSt "a secret"
 $ pngme decode image.png ruSt
'''
import logging
import os
import sys

from .exceptions import PngmeException
from .png import Png
from .utils import encode_message, decode_message, remove_message


logger = logging.getLogger(__name__)


USAGE = '''usage: {progname} <command> [arguments]

commands:
  encode <file> <chunk type> <message> [output file]
  decode <file> <chunk type>
  remove <file> <chunk type>
  print  <file>'''


def usage(progname):
    print(USAGE.format(progname=progname))
    return 1


def do_encode(path, chunk_type, message, output=None):
    png = Png.from_file(path)
    chunk = encode_message(png, chunk_type, message)
    png.save(output or path)
    logger.info(f'message stored in chunk {chunk.chunk_type} of \'{output or path}\'')


def do_decode(path, chunk_type):
    png = Png.from_file(path)
    print(decode_message(png, chunk_type))


def do_remove(path, chunk_type):
    png = Png.from_file(path)
    chunk = remove_message(png, chunk_type)
    png.save(path)
    logger.info(f'removed {chunk!r} from \'{path}\'')


def do_print(path):
    png = Png.from_file(path)
    print(png, end='')


# command name -> (function, minimum number of arguments, maximum number of arguments)
COMMANDS = {
    'encode': (do_encode, 3, 4),
    'decode': (do_decode, 2, 2),
    'remove': (do_remove, 2, 2),
    'print': (do_print, 1, 1),
}


def main(argv=None):
    argv = sys.argv if argv is None else argv
    progname = os.path.basename(argv[0]) if argv else 'pngme'

    logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)

    if len(argv) < 2 or argv[1] not in COMMANDS:
        return usage(progname)

    command, n_min, n_max = COMMANDS[argv[1]]
    args = argv[2:]

    if not n_min <= len(args) <= n_max:
        return usage(progname)

    try:
        command(*args)
    except (PngmeException, OSError) as e:
        logger.error(f'{argv[1]} failed: {e}')
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
