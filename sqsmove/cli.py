import sys
from argparse import ArgumentParser
from typing import Callable, Dict, List, Optional

import boto3
import botocore.config

from sqsmove.config import load_config
from sqsmove.discovery import discover_queues
from sqsmove.errors import MoveError
from sqsmove.facade.sqs import SQS
from sqsmove.orchestrator import Transfer
from sqsmove.prompt import QueuePrompt


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(description='Move messages from one SQS queue to another')
    parser.add_argument('-c', '--concurrency', type=int,
                        help='The level of concurrency used to process the messages (default 10)')
    parser.add_argument('-f', '--filter',
                        help='The text string that a message needs to contain to be moved')
    parser.add_argument('-r', '--region', help='AWS region (default eu-west-1)')
    parser.add_argument('-p', '--profile', help='AWS profile name')
    parser.add_argument('-s', '--source', help='Source queue url, the prompt only asks for what is not given')
    parser.add_argument('-t', '--destination', help='Destination queue url')
    parser.add_argument('--queue-name-prefix', help='Only offer queues whose name starts with this prefix')
    parser.add_argument('--max-empty-rounds', type=int,
                        help='Stop draining after this many rounds return nothing, 0 never stops early (default 3)')
    parser.add_argument('--config', help='YAML file holding any of the settings above')
    return parser


def create_sqs_client(config: Dict):
    session = boto3.session.Session(region_name=config['region'], profile_name=config['profile'])
    client_config = botocore.config.Config(
        retries={'mode': 'standard'},
        max_pool_connections=max(10, config['concurrency'])
    )
    return session.client('sqs', config=client_config)


def main(argv: Optional[List[str]] = None, ask: Callable[[str], str] = input, log: Callable = print) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config(vars(args))
        sqs = SQS(create_sqs_client(config))
        if config['source'] and config['destination']:
            source, destination = config['source'], config['destination']
        else:
            choices = discover_queues(sqs, config['queue_name_prefix'])
            source, destination = QueuePrompt(ask=ask, log=log).select(
                choices, source=config['source'] or None, destination=config['destination'] or None
            )
        transfer = Transfer(
            sqs, concurrency=config['concurrency'], message_filter=config['filter'],
            max_empty_rounds=config['max_empty_rounds'], log=log
        )
        transfer.run(source, destination)
    except MoveError as ex:
        log(f'Error: {ex}')
        return 1
    except (KeyboardInterrupt, EOFError):
        log('Aborted')
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
