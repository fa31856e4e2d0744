import unittest
from commentsplit.merger import merge_keeping_code

REFACTOR_LEFT = """async function oldApproach() {
  // Create temp directory for processing
  const tmp = path.join(os.tmpdir(), "processing");
  const results = await Promise.all(
    items.map(async (item) => {
      const file = await writeToTemp(tmp, item);  // write to disk
      const output = await processFile(file);
      return output;
    })
  );

  // Clean up temp files
  await fs.rm(tmp, { recursive: true });
  return results;
}
"""

REFACTOR_RIGHT = """async function newApproach() {
  // Modern in-memory processing
  const results = await Promise.all(
    items.map(async (item) => {
      return await processInMemory(item);
    })
  );

  return results;
}
"""

# Deleted comments come back next to the new code; the trailing deletion has
# no code insertion in its hunk, so it is restored as well.
REFACTOR_EXPECTED = """  // Create temp directory for processing
async function newApproach() {
  const results = await Promise.all(
    items.map(async (item) => {
      return await processInMemory(item);
    })
  );

  // Clean up temp files
  await fs.rm(tmp, { recursive: true });
  return results;
}
"""

API_LEFT = """import { fetch } from "lib"

const API_BASE = "https://api.example.com"

export async function getUsers() {
  const response = await fetch(`${API_BASE}/users`)
  const data = await response.json()
  return data
    .filter(u => u.active)
    .map(u => u.name)
}
"""

API_RIGHT = """import { fetch, logger } from "lib"

const API_BASE = "https://api.example.com"
const FALLBACK = "http://backup.example.com"

export async function getUsers() {
  // Fetch users from API
  const response = await fetch(`${API_BASE}/users`)
  const data = await response.json()
  return data
    .filter(u => u.active) // only active users
    .map(u => u.name) // extract names
}
"""

API_EXPECTED = """import { fetch, logger } from "lib"

const API_BASE = "https://api.example.com"
const FALLBACK = "http://backup.example.com"

export async function getUsers() {
  const response = await fetch(`${API_BASE}/users`)
  const data = await response.json()
  return data
    .filter(u => u.active)
    .map(u => u.name)
}
"""

CONFIG_LEFT = """THEME = {
    "primary": "#ff0000",
    "secondary": "#00ff00"
}

def process(data):
    return data * 2
"""

CONFIG_RIGHT = """# Configuration module
THEME = {
    "primary": "#ff0000",
    "secondary": "#00ff00",
    "accent": "#0000ff"
}

def process(data):
    # Double the input value
    return data * 2
"""

CONFIG_EXPECTED = """THEME = {
    "primary": "#ff0000",
    "secondary": "#00ff00",
    "accent": "#0000ff"
}

def process(data):
    return data * 2
"""


class TestRegression(unittest.TestCase):
    """
    Realistic source files with several hunks each.
    """

    def test_typescript_refactor(self):
        self.assertEqual(merge_keeping_code(REFACTOR_LEFT, REFACTOR_RIGHT), REFACTOR_EXPECTED)

    def test_typescript_api_module(self):
        self.assertEqual(merge_keeping_code(API_LEFT, API_RIGHT), API_EXPECTED)

    def test_python_config(self):
        self.assertEqual(merge_keeping_code(CONFIG_LEFT, CONFIG_RIGHT), CONFIG_EXPECTED)

    def test_imports_and_comment_change_together(self):
        left = ('import { foo, bar, baz } from "lib"\nimport { old } from "old-lib"\n\n'
                'function main() {\n  return foo()\n}\n')
        right = ('import { foo, bar } from "lib"\nimport { newThing } from "new-lib"\n\n'
                 'function main() {\n  // Call foo\n  return foo()\n}\n')
        expected = ('import { foo, bar } from "lib"\nimport { newThing } from "new-lib"\n\n'
                    'function main() {\n  return foo()\n}\n')
        self.assertEqual(merge_keeping_code(left, right), expected)

    def test_mixed_hunks_keep_old_comments(self):
        left = "// old comment\ncode1\n// another comment\ncode2\n"
        right = "code1\n// new comment\ncode3\n"
        self.assertEqual(merge_keeping_code(left, right),
                         "// old comment\ncode1\n// another comment\ncode3\n")

    def test_neighbouring_hunks(self):
        left = ("function foo() {\n  // Existing comment from previous commit\n  return 1\n}\n\n"
                "function bar() {\n  return 2\n}\n")
        right = ("function foo() {\n  // Existing comment from previous commit\n  return 1\n}\n\n"
                 "function bar() {\n  // New comment added in this change\n  return 2\n  const x = 3\n}\n")
        expected = ("function foo() {\n  // Existing comment from previous commit\n  return 1\n}\n\n"
                    "function bar() {\n  return 2\n  const x = 3\n}\n")
        self.assertEqual(merge_keeping_code(left, right), expected)

    def test_separated_comment_hunks(self):
        left = ('function first() {\n  return 1\n}\n\nconst sep = "---"\n\n'
                'function second() {\n  return 2\n}\n')
        right = ('function first() {\n  // First function\n  return 1\n}\n\nconst sep = "---"\n\n'
                 'function second() {\n  // Second function\n  return 2\n}\n')
        self.assertEqual(merge_keeping_code(left, right), left)

    def test_string_literals_in_mixed_hunk(self):
        left = 'const msg = "use comments"\nconst url = "https://example.com"\n'
        right = ('const msg = "use // comments"\nconst url = "https://example.com/api"\n'
                 'const info = "new line"\n')
        self.assertEqual(merge_keeping_code(left, right), right)


if __name__ == '__main__':
    unittest.main()
