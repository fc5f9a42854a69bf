"""
Project File Templates
======================

Static content written by vicsetup into a new project: the sample
program, the two wrapper scripts and the hardware reference sheet.
"""

# =============================================================================
# Sample Program (src/hello.asm)
# =============================================================================

HELLO_ASM = """\
; Hello World for VIC-20
; Assembled with ACME

!to "build/hello.prg", cbm

; VIC-20 Constants
SCREEN_RAM = $1e00
COLOR_RAM = $9600
CHROUT = $ffd2

*= $1100                    ; Start at safe ML area

start:
    ; Clear screen
    lda #$93                ; Clear screen character
    jsr CHROUT

    ; Set up message pointer
    ldx #0

print_loop:
    lda message,x           ; Get character
    beq done                ; If zero, we're done
    jsr CHROUT              ; Print character
    inx
    bne print_loop          ; Continue until done

done:
    rts                     ; Return to BASIC

message:
    !text "HELLO VIC-20!"
    !byte 13, 0             ; CR and null terminator
"""


# =============================================================================
# Wrapper Scripts (tools/)
# =============================================================================

BUILD_SH = """\
#!/bin/bash
# Assemble every program in src/ into build/
exec vicbuild "$@"
"""

RUN_SH = """\
#!/bin/bash
# Run a built program in the VIC-20 emulator
# Usage: ./tools/run.sh <program_name>
exec vicrun "$@"
"""


# =============================================================================
# Reference Sheet (docs/vic20-reference.md)
# =============================================================================

REFERENCE_MD = """\
# VIC-20 Development Reference

## Memory Map
- $0000-$03FF: Zero page and stack
- $1000-$1DFF: RAM (safe for programs)
- $1E00-$1FE7: Screen RAM (22x23 characters)
- $8000-$8FFF: Character ROM
- $9000-$900F: VIC chip registers
- $9600-$97E7: Color RAM
- $C000-$DFFF: BASIC ROM

## Useful KERNAL Routines
- $FFD2: CHROUT - Output character
- $FFCF: CHRIN - Input character
- $FFE4: GETIN - Get key press

## VIC Chip Registers
- $9000: Horizontal position
- $9001: Vertical position
- $9002: Columns displayed
- $9003: Rows displayed
- $900F: Screen/border color

## Colors
0=Black, 1=White, 2=Red, 3=Cyan, 4=Purple, 5=Green, 6=Blue, 7=Yellow

## Tools
- `./tools/build.sh` assembles every `src/*.asm` into `build/*.prg`
- `./tools/run.sh hello` runs `build/hello.prg` in the emulator (Ctrl+C to exit)
"""
