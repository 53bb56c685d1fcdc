import typer
from typing_extensions import Annotated
from rich.console import Console
from rich.table import Table
import seaborn as sns
import matplotlib.pyplot as plt
import pandas as pd

from simplecipher.alphabet import ALPHABET
from simplecipher.cipher import Cipher, KEY_LENGTH, generate_key
from simplecipher.utils import frequency_table, letter_distribution, index_of_coincidence

app = typer.Typer()
console = Console()

def fail(e:ValueError):
    console.print(f"[red]{e}")
    raise typer.Exit(code=1)

@app.command()
def encode(
    text:Annotated[str, typer.Argument(help="Lowercase text to encode")],
    key:Annotated[str, typer.Option("-k", "--key", help="Lowercase key (a random one is generated and shown if omitted)")]=None,
):
    try:
        cipher = Cipher(key)
        ctxt = cipher.encode(text)
    except ValueError as e:
        fail(e)

    if key is None:
        console.print(f"key: {cipher.key}", soft_wrap=True)
    console.print(ctxt, soft_wrap=True)

@app.command()
def decode(
    text:Annotated[str, typer.Argument(help="Lowercase text to decode")],
    key:Annotated[str, typer.Option("-k", "--key", help="Key the text was encoded with")],
):
    try:
        ptxt = Cipher(key).decode(text)
    except ValueError as e:
        fail(e)

    console.print(ptxt, soft_wrap=True)

@app.command()
def keygen(
    n:Annotated[int, typer.Option("-n", "--length", help="Number of letters in the key")]=KEY_LENGTH,
):
    try:
        key = generate_key(n)
    except ValueError as e:
        fail(e)

    console.print(key, soft_wrap=True)

@app.command()
def stats(
    text:Annotated[str, typer.Argument(help="Lowercase text to calculate the letter distribution of")],
    graph:Annotated[bool, typer.Option("-g", "--graph", help="Graph the Distribution")]=False,
):
    try:
        counts = frequency_table(text)
        prob = letter_distribution(text)
        ioc = index_of_coincidence(text)
    except ValueError as e:
        fail(e)

    table = Table(title="Letter Distribution")
    table.add_column("Char")
    table.add_column("Count")
    table.add_column("Frequency")

    for i, c in enumerate(ALPHABET):
        if counts[i] == 0:
            continue
        table.add_row(c, str(counts[i]), "{:.3f}".format(prob[i]))
    console.print(table)
    console.print("Index of Coincidence: {:.4f}".format(ioc))

    if graph:
        df = pd.DataFrame()
        df['x'] = list(ALPHABET)
        df['w'] = list(prob)
        sns.histplot(df, x='x', weights='w', discrete=True)
        plt.show()

def main():
    app()

if __name__ == "__main__":
    main()
