"""Bencode2JSON 命令行工具."""

import sys
from typing import BinaryIO

import click
from rich.console import Console
from rich.text import Text

from . import __version__
from .api import transcode
from .exceptions import BencodeDecodeError, BencodeError


def _print_error(error: BencodeError) -> None:
    """在标准错误上输出转换错误."""
    console = Console(stderr=True, highlight=False)

    label = Text("转换失败: ", style="bold red")
    label.append(str(error))
    console.print(label, soft_wrap=True)

    if isinstance(error, BencodeDecodeError) and error.pos is not None:
        console.print(
            Text(f"已消费 {error.pos} 字节, 之前写出的输出不完整", style="dim"),
            soft_wrap=True,
        )


@click.command(help=f"把 Bencode 转换为 JSON (v{__version__})")
@click.option(
    "-i",
    "--input",
    "input_file",
    type=click.File("rb"),
    default="-",
    help="输入文件 (默认为标准输入)",
)
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.File("wb"),
    default="-",
    help="输出文件 (默认为标准输出)",
)
def cli(input_file: BinaryIO, output_file: BinaryIO) -> None:
    """Bencode 到 JSON 转换工具.

    Examples:
      # 从标准输入读取, 写出到标准输出
      printf 'd3:fooi42ee' | bencode2json

      # 文件到文件
      bencode2json -i sample.torrent -o sample.json
    """
    try:
        transcode(input_file, output_file, suppress_log=True)
        output_file.write(b"\n")
        output_file.flush()
    except BencodeError as e:
        _print_error(e)
        sys.exit(1)
    except OSError as e:
        raise click.ClickException(f"读写失败: {e}") from e


def main() -> None:
    """入口函数."""
    cli()


if __name__ == "__main__":
    main()
