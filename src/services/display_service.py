from config import LoanResult, CURRENCY_SYMBOL, LABEL_WIDTH, VALUE_WIDTH

BOX_TITLE = "POWER TOOL INFO"
BOX_INNER_WIDTH = LABEL_WIDTH + VALUE_WIDTH + 4  # "║ " + label + ": " + value + " ║"

def format_price(amount):
    return f"{CURRENCY_SYMBOL}{amount:.2f}"

def format_detail(label, value):
    if label == "Price":
        return format_price(value)
    if label == "Borrowed":
        return "Yes" if value else "No"
    return str(value)

def render_tool(tool):
    """Render the boxed info block for a single tool"""
    lines = [
        "╔" + "═" * BOX_INNER_WIDTH + "╗",
        "║" + BOX_TITLE.center(BOX_INNER_WIDTH) + "║",
        "╠" + "═" * BOX_INNER_WIDTH + "╣",
    ]
    for label, value in tool.get_details():
        value = format_detail(label, value)
        lines.append(f"║ {label:<{LABEL_WIDTH}}: {value:<{VALUE_WIDTH}} ║")
    lines.append("╚" + "═" * BOX_INNER_WIDTH + "╝")
    return "\n".join(lines)

def describe_result(tool, result):
    """Status line reported to the user after an operation on a tool"""
    if result == LoanResult.BORROWED:
        return f"Tool {tool.serial_number} has been successfully borrowed."
    elif result == LoanResult.ALREADY_ON_LOAN:
        return f"Error: The tool {tool.serial_number} is already on loan."
    elif result == LoanResult.RETURNED:
        return f"Tool {tool.serial_number} has been returned."
    elif result == LoanResult.PRICE_UPDATED:
        return f"Price updated to: {format_price(tool.check_price())}"
    elif result == LoanResult.INVALID_PRICE:
        return "Error: Invalid price. Price must be non-negative."
    else:
        raise ValueError(f"Invalid loan result: {result}")

def print_banner(title, leading_newline=False):
    if leading_newline:
        print()
    print(f"{title}:")
    print("=" * (len(title) + 1))
