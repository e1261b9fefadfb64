# cppsage/templates.py
"""
File templates written by ``sage new``.

Static templates are plain strings. Templates that depend on the project
name are functions taking that name. Long templates are assembled from a list
of short lines joined with newlines.
"""

from __future__ import annotations

from typing import List

from cppsage.config import END_MARKER, START_MARKER, TOOLCHAIN_FILE

__all__ = [
    "clang_format",
    "CLANGD",
    "EDITORCONFIG",
    "GITIGNORE",
    "cmake_lists_top",
    "CONFIG_CMAKE",
    "cmake_lists_sub",
    "MAIN_CPP",
    "REQUIREMENTS_TXT",
]


def _clang_format_lines(project_name: str) -> List[str]:
    return [
        "Language: Cpp",
        "BasedOnStyle: LLVM",
        "AccessModifierOffset: -2",
        "AlignAfterOpenBracket: Align",
        "AlignConsecutiveAssignments: false",
        "AlignConsecutiveDeclarations: false",
        "AlignEscapedNewlines: Left",
        "AlignOperands: Align",
        "AlignTrailingComments: true",
        "AllowAllParametersOfDeclarationOnNextLine: true",
        "AllowShortBlocksOnASingleLine: false",
        "AllowShortCaseLabelsOnASingleLine: false",
        "AllowShortFunctionsOnASingleLine: All",
        "AllowShortIfStatementsOnASingleLine: Never",
        "AllowShortLoopsOnASingleLine: false",
        "AlwaysBreakAfterDefinitionReturnType: None",
        "AlwaysBreakAfterReturnType: None",
        "AlwaysBreakBeforeMultilineStrings: false",
        "AlwaysBreakTemplateDeclarations: Yes",
        "BinPackArguments: true",
        "BinPackParameters: true",
        "BraceWrapping:",
        "  AfterClass: false",
        "  AfterControlStatement: false",
        "  AfterEnum: false",
        "  AfterFunction: false",
        "  AfterNamespace: false",
        "  AfterObjCDeclaration: false",
        "  AfterStruct: false",
        "  AfterUnion: false",
        "  AfterExternBlock: false",
        "  BeforeCatch: false",
        "  BeforeElse: false",
        "  IndentBraces: false",
        "BreakBeforeBraces: Custom",
        "BreakBeforeBinaryOperators: None",
        "BreakBeforeInheritanceComma: false",
        "BreakBeforeTernaryOperators: true",
        "BreakConstructorInitializers: BeforeColon",
        "ColumnLimit: 80",
        "ConstructorInitializerAllOnOneLineOrOnePerLine: false",
        "ConstructorInitializerIndentWidth: 4",
        "ContinuationIndentWidth: 4",
        "Cpp11BracedListStyle: true",
        "DerivePointerAlignment: false",
        "DisableFormat: false",
        "ExperimentalAutoDetectBinPacking: false",
        "FixNamespaceComments: true",
        "ForEachMacros:",
        "  - foreach",
        "  - Q_FOREACH",
        "  - BOOST_FOREACH",
        "IncludeBlocks: Preserve",
        "IncludeCategories:",
        f"  - Regex: '^\"({project_name}|config)\\.h\"'",
        "    Priority: 1",
        "  - Regex: '^<.*\\.h>'",
        "    Priority: 2",
        "  - Regex: '^<.*'",
        "    Priority: 3",
        "  - Regex: '.*'",
        "    Priority: 4",
        "IncludeIsMainRegex: '(Test)?\\.cpp$'",
        "IndentCaseLabels: false",
        "IndentPPDirectives: None",
        "IndentWidth: 4",
        "IndentWrappedFunctionNames: false",
        "JavaScriptQuotes: Leave",
        "JavaScriptWrapImports: true",
        "KeepEmptyLinesAtTheStartOfBlocks: true",
        "MacroBlockBegin: ''",
        "MacroBlockEnd: ''",
        "MaxEmptyLinesToKeep: 1",
        "NamespaceIndentation: None",
        "ObjCBlockIndentWidth: 4",
        "ObjCSpaceAfterProperty: false",
        "ObjCSpaceBeforeProtocolList: true",
        "PenaltyBreakAssignment: 2",
        "PenaltyBreakBeforeFirstCallParameter: 19",
        "PenaltyBreakComment: 300",
        "PenaltyBreakFirstLessLess: 120",
        "PenaltyBreakString: 1000",
        "PenaltyReturnTypeOnItsOwnLine: 60",
        "PointerAlignment: Left",
        "ReflowComments: true",
        "SortIncludes: true",
        "SortUsingDeclarations: true",
        "SpaceAfterCStyleCast: false",
        "SpaceAfterTemplateKeyword: true",
        "SpaceBeforeAssignmentOperators: true",
        "SpaceBeforeCpp11BracedList: false",
        "SpaceBeforeCtorInitializerColon: true",
        "SpaceBeforeInheritanceColon: true",
        "SpaceBeforeParens: ControlStatements",
        "SpaceInEmptyParentheses: false",
        "SpacesBeforeTrailingComments: 2",
        "SpacesInAngles: false",
        "SpacesInContainerLiterals: false",
        "SpacesInCStyleCastParentheses: false",
        "SpacesInParentheses: false",
        "Standard: Cpp11",
        "TabWidth: 4",
        "UseTab: Never",
    ]


def clang_format(project_name: str) -> str:
    return "\n".join(_clang_format_lines(project_name)) + "\n"


CLANGD = """\
CompileFlags:
  Add: [-std=c++17]
"""

EDITORCONFIG = """\
root = true

[*]
indent_style = space
indent_size = 4
end_of_line = lf
charset = utf-8
trim_trailing_whitespace = true
insert_final_newline = true
"""

GITIGNORE = """\
# CMake
build/
install/
*.VC.db
*.VC.VC.opendb

# Visual Studio
.vs/
*.suo
*.user
*.sln.docstates

# Packages
packages/

# Misc
*.log
"""


def cmake_lists_top(project_name: str) -> str:
    return f"""\
cmake_minimum_required(VERSION 3.15)

# Conan package management
include(cmake/config.cmake)

project({project_name} VERSION 0.1.0 LANGUAGES CXX)

set(CMAKE_CXX_STANDARD 17)
set(CMAKE_CXX_STANDARD_REQUIRED ON)

add_subdirectory({project_name})
"""


_TOOLCHAIN = "${CMAKE_CURRENT_SOURCE_DIR}/" + TOOLCHAIN_FILE.as_posix()

CONFIG_CMAKE = f"""\
# This file is managed by cppsage.
# Manual edits might be overwritten.

# Check if conan_toolchain.cmake exists
if(EXISTS "{_TOOLCHAIN}")
    include("{_TOOLCHAIN}")
else()
    message(WARNING "Conan toolchain not found. Run 'sage install' to generate it.")
endif()
"""


def cmake_lists_sub(project_name: str) -> str:
    return f"""\
add_executable({project_name}
    src/main.cpp
)

target_include_directories({project_name} PUBLIC
    "${{CMAKE_CURRENT_SOURCE_DIR}}/include"
)

{START_MARKER}
{END_MARKER}
"""


MAIN_CPP = """\
#include <iostream>

int main() {
    std::cout << "Hello, world!" << std::endl;
    return 0;
}
"""

REQUIREMENTS_TXT = """\
# Add your dependencies here
# e.g. fmt/10.2.1
"""
