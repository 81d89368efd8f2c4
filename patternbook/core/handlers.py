"""
    Copyright 2018 EPAM Systems, Inc.

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.
"""
import click
from tabulate import tabulate

from patternbook.commons.log_helper import get_logger
from patternbook.core.constants import (BUILDER_ACTION, PROXY_ACTION,
                                        LIST_ACTION, OK_RETURN_CODE,
                                        DEMOS_DESCRIPTION)
from patternbook.core.decorators import return_code_manager
from patternbook.core.demo_processor import run_builder_demo, run_proxy_demo
from patternbook.core.helper import verbose_option
from patternbook import __version__

_LOG = get_logger(__name__)


@click.group(name='patternbook', invoke_without_command=True)
@click.version_option(version=__version__)
@click.pass_context
@return_code_manager
def patternbook(ctx):
    """Runs the design patterns demonstrations"""
    if ctx.invoked_subcommand is None:
        _LOG.debug('No command given, running every demo')
        run_builder_demo()
        run_proxy_demo()
        return OK_RETURN_CODE


@patternbook.command(name=BUILDER_ACTION)
@return_code_manager
@verbose_option
def builder():
    """
    Demonstrates the Builder pattern
    """
    run_builder_demo()
    return OK_RETURN_CODE


@patternbook.command(name=PROXY_ACTION)
@return_code_manager
@verbose_option
def proxy():
    """
    Demonstrates the Proxy pattern
    """
    run_proxy_demo()
    return OK_RETURN_CODE


@patternbook.command(name=LIST_ACTION)
@return_code_manager
@verbose_option
def list_demos():
    """
    Lists available demonstrations
    """
    click.echo(tabulate(
        [[name, description] for name, description
         in DEMOS_DESCRIPTION.items()],
        headers=['Demo', 'Description']
    ))
    return OK_RETURN_CODE
