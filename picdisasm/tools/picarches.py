from picdisasm import Architecture, DEFAULT_ARCH_NAME


def yes_no(val):
    return 'yes' if val else 'no'

def main():
    print('Supported Architectures:\n')
    for arch in Architecture.all():
        print(f'{arch.name} ({arch.description})')
        print(f'    word bits: {arch.word_bits}  pc bits: {arch.pc_bits}  default: {yes_no(arch.name == DEFAULT_ARCH_NAME)}')
        print(f'    instructions: {len(arch.isa.mnemonics)}')
        print(f'        {" ".join(arch.isa.mnemonics)}')
        print()


if __name__ == '__main__':
    main()
