import picdisasm as pd


def main():
    for file_type in pd.FileType.all():
        print(f'{file_type.name} ({file_type.description})')
        if len(file_type.extensions) > 0:
            extensions = ' '.join('.' + ext for ext in file_type.extensions)
            print(f'    extensions: {extensions}')
        print()

if __name__ == '__main__':
    main()
