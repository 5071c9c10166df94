import argparse
import logging
import sys

from tabulate import tabulate

from parsez import config
from parsez.command import parse_command
from parsez.pipe import fn
from parsez.seq import seq

log = logging.getLogger('parsez.main')


def row(cmd, source, options):
    res = parse_command(cmd, source, options=options)
    if not res:
        log.warning('could not parse %r', source)
        return [source, '', '', '', res.message]
    args = res.value.args
    return [source,
            args.flags >> seq.join(' '),
            args.named.items() >> seq.map(lambda k, v: f'{k}={v}') >> seq.join(' '),
            args.positional >> seq.join(' '),
            '']


def main(argv=None):
    arg_parser = argparse.ArgumentParser(description='Parse command line statements listed in a YAML file.')
    arg_parser.add_argument('config', help='YAML file with "command" and "statements"')
    arg_parser.add_argument('-v', '--verbose', action='store_true', help='trace the parsers')
    args = arg_parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(name)s - %(levelname)s - %(message)s')

    cfg = config.load(args.config)
    rows = cfg.statements >> seq.map(lambda s: row(cfg.command, s, cfg.code_frame)) >> seq.to_list()
    tabulate(rows, headers=['statement', 'flags', 'named', 'positional', 'error']) >> fn(print)
    return 0 if rows >> seq.all(lambda r: not r[-1]) else 1


if __name__ == '__main__':
    sys.exit(main())
