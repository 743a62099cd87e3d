"""
Display formatting for conversion results.

`format_conversion` renders a float with 7 significant digits and trims the
noise a fixed precision leaves behind:

    5.500000  -> "5.5"
    10.00000  -> "10"
    5.123456  -> "5.123456"   (already uses every digit, returned as-is)
    0.00001000000 -> "0.00001"
    1.500000e+10 -> "1.5e+10"

Fixed notation is used while the decimal exponent lies in [-6, 7); outside
that range the value is written as mantissa and exponent, with no padding
on the exponent ("1.234568e+7", "1e-7").

Trimming only ever touches the mantissa, so an exponent such as "e+10" is
never mistaken for trailing zeros. The output always parses back to a value
that formats to the same string.
"""

import math

PRECISION = 7
MIN_FIXED_EXPONENT = -6


def format_conversion(conversion: float) -> str:
    """
    Render `conversion` with `PRECISION` significant digits, trimming trailing zeros.

    Parameters
    ----------
    conversion : float
        The raw converted value.

    Returns
    -------
    str
        Never ends in '.' and never carries more than `PRECISION` significant digits.
    """
    if not math.isfinite(conversion):
        return str(conversion)

    # Round first so the exponent reflects carries such as 9.9999999 -> 1.000000e+01.
    mantissa, _, exponent = f"{conversion:.{PRECISION - 1}e}".partition("e")
    exponent = int(exponent)

    if MIN_FIXED_EXPONENT <= exponent < PRECISION:
        output_num = f"{conversion:.{PRECISION - 1 - exponent}f}"
        suffix = ""
    else:
        output_num = mantissa
        suffix = f"e{exponent:+d}"

    if "." in output_num and output_num.endswith("0"):
        output_num = output_num.rstrip("0")
    if output_num.endswith("."):
        output_num = output_num[:-1]

    return output_num + suffix


if __name__ == "__main__":
    # Example usage / quick sanity checks
    print(format_conversion(10.0))        # 10
    print(format_conversion(32.8084))     # 32.8084
    print(format_conversion(1 / 3))       # 0.3333333
    print(format_conversion(0.00001))     # 0.00001
    print(format_conversion(12345678.0))  # 1.234568e+7
    print(format_conversion(1.5e10))      # 1.5e+10
