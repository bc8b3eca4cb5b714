"""Quickstart example for timelexengine.

This example demonstrates pattern-driven parsing and formatting of dates
and times, the three resolver styles, and the non-raising parse API.

Note: Examples ignore some 'errors' return values for brevity. In
production, always check errors and log/report invalid input.
"""

from datetime import date, datetime

from timelexengine import (
    ISO_LOCAL_DATE,
    DateTimeFormatter,
    ParseError,
    ResolutionError,
    ResolverStyle,
    format_value,
    parse_text,
)
from timelexengine.diagnostics import DiagnosticFormatter, OutputFormat
from timelexengine.parsing import parse_date, parse_datetime, validate
from timelexengine.runtime import cldr_style_table

# Example 1: Predefined ISO formatter
print("=" * 50)
print("Example 1: ISO Date")
print("=" * 50)

value = ISO_LOCAL_DATE.parse("1974-11-14")
print(value)
# Output: 1974-11-14

print(value.to_date())
# Output: 1974-11-14

try:
    ISO_LOCAL_DATE.parse("11/14/1974")
except ParseError as error:
    print(f"Rejected at position {error.position}")
# Output: Rejected at position 0

# Example 2: Resolver styles
print("\n" + "=" * 50)
print("Example 2: STRICT / SMART / LENIENT")
print("=" * 50)

# September has 30 days; each style treats the 31st differently
for style in ResolverStyle:
    try:
        result = parse_text("09/31/2022 12:00", "MM/dd/uuuu HH:mm", style)
        print(f"{style}: {result}")
    except ResolutionError as error:
        print(f"{style}: {error.diagnostic}")
# Output:
# strict: Invalid field value for day-of-month: 31 (valid values 1 - 30)
# smart: 2022-09-30T12:00
# lenient: 2022-10-01T12:00

# Example 3: Formatting
print("\n" + "=" * 50)
print("Example 3: Formatting")
print("=" * 50)

moment = datetime(2022, 9, 30, 16, 5)
print(format_value(moment, "EEE, d MMM uuuu h:mm a"))
# Output: Fri, 30 Sep 2022 4:05 PM

print(format_value(moment, "EEEEE d MMMMM uuuu"))
# Output: Friday 30 September 2022

print(format_value(date(2022, 9, 30), "dd/MM/yy"))
# Output: 30/09/22

# Example 4: Reusable formatters
print("\n" + "=" * 50)
print("Example 4: Reusable Formatters")
print("=" * 50)

formatter = DateTimeFormatter.of_pattern("uuuuMMddHHmm")
print(formatter.parse("202209301621"))
# Output: 2022-09-30T16:21

strict = formatter.with_resolver_style(ResolverStyle.STRICT)
print(strict)
# Output: uuuuMMddHHmm[strict]

cldr = DateTimeFormatter.of_pattern("EEEE d MMMM uuuu").with_styles(cldr_style_table())
print(cldr.parse("Friday 30 September 2022").to_date())
# Output: 2022-09-30

# Example 5: Non-raising parse API
print("\n" + "=" * 50)
print("Example 5: Non-raising Parse API")
print("=" * 50)

parsed, errors = parse_date("30.09.2022", "dd.MM.uuuu")
print(parsed, errors)
# Output: 2022-09-30 ()

parsed_dt, errors = parse_datetime("8-18-2022 16:21", "MM/dd/uuuu HH:mm")
print(parsed_dt, len(errors))
# Output: None 1

# Example 6: Validation and diagnostics
print("\n" + "=" * 50)
print("Example 6: Validation")
print("=" * 50)

result = validate("2022-02-30")
print(result.format())
# Output:
# Validation failed: 1 error(s)
# error[RESOLUTION_VALUE_INVALID]: Invalid field value for day-of-month: 30 (valid values 1 - 28)
#   ...

simple = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
print(simple.format_all(result.errors))
# Output: RESOLUTION_VALUE_INVALID: Invalid field value for day-of-month: 30 (valid values 1 - 28)

print("\n" + "=" * 50)
print("All examples completed successfully!")
print("=" * 50)
