from models.tools import PowerTool
from services.display_service import describe_result, format_price, print_banner

ACTIONS = ("borrow", "return", "change_price")

class PowerToolDemo:
    def __init__(self):
        self.tools = [
            PowerTool("DeWalt", "DCD771", "Drill", "DW12345", 89.99, False),
            PowerTool("Makita", "XRJ04Z", "Saw", "MK67890", 149.99),
            PowerTool("Milwaukee", "2850-20", "Grinder", "MW24680", 199.99, True),
            PowerTool.essential("Bosch", "ROS20VSC", "ROS12345"),
        ]

    def execute(self, tool, action, *args):
        """Run a single named action on a tool and print its outcome"""
        if action == "borrow":
            result = tool.borrow()
        elif action == "return":
            result = tool.return_tool()
        elif action == "change_price":
            result = tool.change_price(*args)
        else:
            raise ValueError(f"Invalid action: {action}")

        print(describe_result(tool, result))
        return result

    def display_inventory(self):
        for tool in self.tools:
            tool.display()

    def _print_status(self, label, tool):
        print(f"{label} - Price: {format_price(tool.check_price())}, Borrowed: {tool.check_borrowed()}")

    def run(self):
        """Exercise every tool operation in a fixed sequence"""
        tool1, tool2, tool3, tool4 = self.tools

        print("=== POWER TOOL MANAGEMENT SYSTEM ===\n")

        print_banner("INITIAL TOOL INVENTORY")
        self.display_inventory()

        print_banner("TESTING BORROW METHOD")
        self.execute(tool1, "borrow")
        self.execute(tool1, "borrow")  # already borrowed
        self.execute(tool3, "borrow")  # constructed on loan

        print_banner("TESTING RETURN METHOD", leading_newline=True)
        self.execute(tool3, "return")
        self.execute(tool3, "borrow")

        print_banner("TESTING PRICE CHANGE", leading_newline=True)
        print(f"Tool 2 current price: {format_price(tool2.check_price())}")
        self.execute(tool2, "change_price", 159.99)
        print(f"Tool 2 new price: {format_price(tool2.check_price())}")
        self.execute(tool2, "change_price", -50.0)

        print_banner("TESTING STATUS CHECKS", leading_newline=True)
        self._print_status("Tool 1", tool1)
        self._print_status("Tool 4", tool4)

        self.execute(tool4, "change_price", 79.99)
        self.execute(tool4, "borrow")

        print_banner("FINAL TOOL INVENTORY", leading_newline=True)
        self.display_inventory()

        print_banner("VALIDATION STATUS")
        print(f"Tool 1 valid: {tool1.is_valid()}")
        print(f"Tool 4 valid: {tool4.is_valid()}")
