import logging
import os
import time

import dash
from dash import dcc, html, dash_table
from dash.dependencies import Input, Output, State
import pandas as pd

from StringCalculator import add

logger = logging.getLogger(__name__)


def env_flag(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ("1", "true", "yes")


# Settings
HOST = os.getenv("CALC_HOST", "127.0.0.1")
PORT = int(os.getenv("CALC_PORT", "8050"))
DEBUG = env_flag("CALC_DEBUG")
DELAY_MS = int(os.getenv("CALC_DELAY_MS", "300"))
LOG_LEVEL = os.getenv("CALC_LOG_LEVEL", "INFO")


def setup_logging(level=LOG_LEVEL):
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        force=True,
    )


EXAMPLES = [
    ("", "Empty string"),
    ("1", "Single number"),
    ("1,5", "Comma separated"),
    ("1\n2,3", "Mixed delimiters"),
    ("//;\n1;2", "Custom delimiter"),
    ("1,-2", "Negative numbers"),
]

RULES = [
    ("Empty String", "Returns 0"),
    ("Delimiters", "Comma, Newline"),
    ("Custom Format", "//[del]\\n[nums]"),
    ("Negatives", "Exception"),
]

QUICK_REFERENCE = [
    ("Basic", '"1,2,3" → 6'),
    ("Mixed", '"1\\n2,3" → 6'),
    ("Custom", '"//;\\n1;2" → 3'),
    ("Error", '"1,-2" → Exception'),
]


def examples_frame(examples=EXAMPLES):
    """Build the examples table, computing each output with the calculator."""
    rows = []
    for numbers, desc in examples:
        try:
            output = str(add(numbers))
        except ValueError:
            output = "Error"
        rows.append({
            'input': '"' + numbers.replace('\n', '\\n') + '"',
            'output': output,
            'description': desc,
        })
    return pd.DataFrame(rows, columns=['input', 'output', 'description'])


def calculate(n_clicks, value):
    if not n_clicks:
        return "", "result"

    if DELAY_MS > 0:
        time.sleep(DELAY_MS / 1000)

    numbers = value or ""
    try:
        total = add(numbers)
    except ValueError as e:
        logger.warning("Calculation failed for %r: %s", numbers, e)
        return [html.Strong("Error:"), f" {e}"], "result error"

    logger.info("Calculated %r = %d", numbers, total)
    return [html.Strong("Result:"), f" {total}"], "result success"


def create_app():
    app = dash.Dash(__name__)
    app.title = "String Calculator TDD Kata"

    df = examples_frame()

    app.layout = html.Div([
        html.H1("String Calculator TDD Kata"),
        html.P("Test-Driven Development exercise for building a progressive string calculator"),
        html.Div([
            html.H3("Calculator"),
            html.Label("Input String", htmlFor='calculator-input'),
            dcc.Input(
                id='calculator-input',
                type='text',
                value='',
                placeholder='Try: 1,2,3 or //;\\n1;2;3',
                style={'width': '100%'}
            ),
            html.Button("Calculate Sum", id='calculate-button', n_clicks=0),
            dcc.Loading(html.Div(id='calculator-result', className='result'), type='circle'),
        ], style={'padding': '20px'}),
        html.Div([
            html.H3("Examples"),
            dash_table.DataTable(
                id='examples-table',
                columns=[{'name': c.capitalize(), 'id': c} for c in df.columns],
                data=df.to_dict('records'),
                style_cell={'fontFamily': 'monospace', 'textAlign': 'left'},
            ),
            html.H3("Rules"),
            html.Ul([html.Li([html.Strong(f"{name}: "), text]) for name, text in RULES]),
            html.H3("Quick Reference"),
            html.Ul([html.Li([html.Strong(f"{name}: "), text]) for name, text in QUICK_REFERENCE]),
        ], style={'padding': '20px'}),
    ])

    app.callback(
        [Output('calculator-result', 'children'),
         Output('calculator-result', 'className')],
        [Input('calculate-button', 'n_clicks')],
        [State('calculator-input', 'value')]
    )(calculate)

    return app


if __name__ == "__main__":
    setup_logging()
    create_app().run(host=HOST, port=PORT, debug=DEBUG)
