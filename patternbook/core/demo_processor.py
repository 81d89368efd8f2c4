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

from patternbook.commons.log_helper import get_logger
from patternbook.commons.oop.complements import (
    client_code, produce_custom_product, produce_product
)
from patternbook.commons.oop.patterns import (
    ConcreteBuilder, Director, Product, RealSubject, Proxy
)
from patternbook.core.constants import (
    STANDARD_BASIC_PRODUCT_TITLE, STANDARD_FULL_FEATURED_PRODUCT_TITLE,
    CUSTOM_PRODUCT_TITLE, CUSTOM_PRODUCT_STEPS, REAL_SUBJECT_CLIENT_TITLE,
    PROXY_CLIENT_TITLE
)

_LOG = get_logger(__name__)


def _echo_product(title: str, product: Product):
    click.echo(title)
    click.echo(product.list_parts())
    click.echo()


def run_builder_demo():
    """
    Builds the standard products through a director, then a custom one
    by driving the very same builder directly.
    """
    builder = ConcreteBuilder()
    director = Director(builder)
    _LOG.debug(f'Builder demo started with {builder.__class__.__name__}')

    director.build_minimal_viable_product()
    _echo_product(STANDARD_BASIC_PRODUCT_TITLE, produce_product(director))

    director.build_full_featured_product()
    _echo_product(STANDARD_FULL_FEATURED_PRODUCT_TITLE,
                  produce_product(director))

    # the builder may be used without a director
    _echo_product(CUSTOM_PRODUCT_TITLE,
                  produce_custom_product(builder, CUSTOM_PRODUCT_STEPS))


def run_proxy_demo():
    """
    Runs the same client code against a real subject and against
    a proxy of it.
    """
    click.echo(REAL_SUBJECT_CLIENT_TITLE)
    real_subject = RealSubject()
    client_code(real_subject)
    click.echo()

    click.echo(PROXY_CLIENT_TITLE)
    proxy = Proxy(real_subject)
    client_code(proxy)
    _LOG.debug('Proxy demo finished')
