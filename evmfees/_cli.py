import click
import json
from typing import TextIO
from .encoding import params_to_json, params_to_ssz, params_from_ssz, params_root, decode_param_value
from .errors import ParamError
from .genesis import default_genesis, validate_genesis
from .key_table import param_key_table
from .types import Params
from .util import encode_hex, decode_hex


@click.group()
def cli():
    """evmfees - fee distribution parameters of an EVM chain

    Validate, change and encode the governance parameters of the fees module.
    """


def load_genesis_params(genesis: TextIO) -> Params:
    try:
        obj = json.load(genesis)
    except ValueError as e:
        raise click.ClickException("invalid genesis json: %s" % e)
    try:
        return validate_genesis(obj)
    except ParamError as e:
        raise click.ClickException("invalid genesis params: %s" % e)


def echo_params(params: Params):
    click.echo(json.dumps(params_to_json(params), indent=2))


@cli.command()
def defaults():
    """Print the default genesis state of the fees module"""
    click.echo(json.dumps(default_genesis(), indent=2))


@cli.command(name='validate')
@click.argument('genesis', type=click.File('r'))
def validate_cmd(genesis: TextIO):
    """Validate the fee params of a genesis file"""
    load_genesis_params(genesis)
    click.echo("params are valid")


@cli.command()
@click.argument('genesis', type=click.File('r'))
@click.argument('key', type=click.STRING)
@click.argument('value', type=click.STRING)
def check_change(genesis: TextIO, key: str, value: str):
    """Apply a parameter change to the params of a genesis file, and print the result

    KEY parameter store key, e.g. DeveloperShares

    VALUE json-encoded parameter value, e.g. '"0.400000000000000000"'
    """
    params = load_genesis_params(genesis)
    try:
        new_value = decode_param_value(key, value.encode())
        updated = param_key_table().apply(params, {key: new_value})
    except ParamError as e:
        raise click.ClickException("rejected change of %s: %s" % (key, e))
    echo_params(updated)


@cli.command()
@click.argument('genesis', type=click.File('r'))
def encode(genesis: TextIO):
    """Print the SSZ encoding and hash-tree-root of the params of a genesis file"""
    params = load_genesis_params(genesis)
    click.echo("ssz: " + encode_hex(params_to_ssz(params)))
    click.echo("root: " + encode_hex(params_root(params)))


@cli.command()
@click.argument('data', type=click.STRING)
def decode(data: str):
    """Decode SSZ-encoded params (hex, 0x prefix optional) and print them as json"""
    try:
        raw = decode_hex(data)
    except ValueError as e:
        raise click.ClickException("invalid hex: %s" % e)
    try:
        params = params_from_ssz(raw)
        params.validate()
    except ParamError as e:
        raise click.ClickException("invalid params: %s" % e)
    echo_params(params)
